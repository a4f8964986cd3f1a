#!/usr/bin/env python3
"""
Parse several documents in one request and print a summary per file.
"""

import asyncio
import os

from anyparser import Anyparser, AnyparserOption

MULTIPLE_FILES = ["docs/sample.docx", "docs/sample.pdf"]


async def main():
    options = AnyparserOption(
        api_url=os.getenv("ANYPARSER_API_URL", "https://anyparserapi.com"),
        api_key=os.getenv("ANYPARSER_API_KEY"),
        format="json",
        image=True,
        table=True,
    )
    parser = Anyparser(options)

    for item in await parser.parse(MULTIPLE_FILES):
        print("-" * 100)
        print("File:", item["originalFilename"])
        print("Checksum:", item["checksum"])
        print("Total characters:", item.get("totalCharacters"))
        print("Markdown:", (item.get("markdown") or "")[:500])

    print("-" * 100)


if __name__ == "__main__":
    asyncio.run(main())
