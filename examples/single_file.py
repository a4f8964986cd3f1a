#!/usr/bin/env python3
"""
Parse one document and print the markdown.
"""

import asyncio
import os

from anyparser import Anyparser, AnyparserError

SINGLE_FILE = "docs/sample.docx"


async def main():
    parser = Anyparser(
        api_url=os.getenv("ANYPARSER_API_URL", "https://anyparserapi.com"),
        api_key=os.getenv("ANYPARSER_API_KEY"),
        format="markdown",
        image=True,
        table=True,
    )

    try:
        print(await parser.parse(SINGLE_FILE))
    except AnyparserError as e:
        print(f"❌ Parse failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
