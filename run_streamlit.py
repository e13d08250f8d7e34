#!/usr/bin/env python
"""
Wrapper to run the storefront Streamlit app
"""
import sys
from pathlib import Path

from streamlit.web import cli as stcli

sys.argv = ["streamlit", "run", str(Path(__file__).parent / "src" / "berrystore" / "ui" / "app.py")]
sys.exit(stcli.main())
