#!/usr/bin/env python3
"""
Smallest possible usage: settings come from ANYPARSER_API_URL / ANYPARSER_API_KEY.
"""

from anyparser import Anyparser

if __name__ == "__main__":
    print(Anyparser().parse_sync("docs/sample.docx"))
