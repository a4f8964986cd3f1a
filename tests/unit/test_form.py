import pytest

from anyparser.form import WireRequest, build_form
from anyparser.models import FileInput
from anyparser.options import CrawlerOption, LamOption, OcrOption, TextOption

BASE = {"api_url": "https://api.example.com/", "api_key": "k", "format": "json"}
FILES = (
    FileInput(file_name="a.pdf", contents=b"aaa"),
    FileInput(file_name="b.docx", contents=b"bbb"),
)


class TestBuildForm:
    def test_text_model_fields(self):
        request = build_form(TextOption(**BASE, image=True, table=False, files=FILES))

        assert request.fields == {
            "format": "json",
            "model": "text",
            "image": "true",
            "table": "false",
        }
        assert request.files == FILES

    def test_unset_flags_are_omitted(self):
        request = build_form(LamOption(**BASE))

        assert request.fields == {"format": "json", "model": "lam"}

    def test_ocr_never_sends_image_or_table(self):
        request = build_form(
            OcrOption(**BASE, ocr_language=("eng", "jpn"), ocr_preset="scan", files=FILES)
        )

        assert "image" not in request.fields
        assert "table" not in request.fields
        assert request.fields["ocrLanguage"] == "eng,jpn"
        assert request.fields["ocrPreset"] == "scan"
        assert request.files == FILES

    def test_ocr_without_languages_or_preset(self):
        request = build_form(OcrOption(**BASE))

        assert request.fields == {"format": "json", "model": "ocr"}

    def test_crawler_url_defaults_to_empty_string(self):
        request = build_form(CrawlerOption(**BASE))

        assert request.fields == {"format": "json", "model": "crawler", "url": ""}
        assert request.files == ()

    def test_crawler_fields(self):
        request = build_form(
            CrawlerOption(
                **BASE,
                url="https://example.com/",
                max_depth=0,
                max_executions=2,
                strategy="FIFO",
                traversal_scope="domain",
            )
        )

        assert request.fields == {
            "format": "json",
            "model": "crawler",
            "url": "https://example.com/",
            "maxDepth": "0",
            "maxExecutions": "2",
            "strategy": "FIFO",
            "traversalScope": "domain",
        }
        assert "files" not in request.fields


class TestWireRequest:
    def test_multipart_parts(self):
        request = WireRequest(fields={"format": "json", "model": "text"}, files=FILES[:1])

        assert request.to_multipart() == [
            ("format", (None, "json")),
            ("model", (None, "text")),
            ("files", ("a.pdf", b"aaa", "application/octet-stream")),
        ]

    def test_is_immutable(self):
        request = WireRequest(fields={})

        with pytest.raises(Exception):
            request.files = FILES
