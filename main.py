# -*- coding: utf-8 -*-
"""
Banking Menu launcher.

Run from the repository root:  python main.py
"""

from bankmenu.cli import main

if __name__ == "__main__":
    main()
