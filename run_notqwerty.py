#!/usr/bin/env python3
"""
Simple runner script for notqwerty.
This allows running from project root without installing.
"""
import sys
import os

# Add src to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from notqwerty.cli import main

sys.exit(main())
