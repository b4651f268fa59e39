#!/usr/bin/env python3
"""
Catbox Uploader - Command Line Interface
A tool for uploading files to Catbox.moe and Litterbox with progress tracking
"""

from catbox_uploader import catbox_uploader

if __name__ == "__main__":
    catbox_uploader.main()
