#!/usr/bin/env python3
"""
Run OCR on a scanned image with a language hint and a preset.
"""

import asyncio
import os

from anyparser import Anyparser, OcrLanguage, OcrPreset

SINGLE_FILE = "docs/document.png"


async def main():
    parser = Anyparser(
        api_url=os.getenv("ANYPARSER_API_URL", "https://anyparserapi.com"),
        api_key=os.getenv("ANYPARSER_API_KEY"),
        model="ocr",
        format="markdown",
        ocr_language=[OcrLanguage.JAPANESE],
        ocr_preset=OcrPreset.SCAN,
    )

    print(await parser.parse(SINGLE_FILE))


if __name__ == "__main__":
    asyncio.run(main())
