from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from docinsight.config.settings import Settings
from docinsight.ocr.example_client_adapter import ExampleOcrAdapter
from docinsight.ocr.exceptions import OcrError
from docinsight.ocr.factory import OcrClientFactory
from docinsight.ocr.openai_vision_adapter import OpenAIVisionAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIVisionAdapter:
    with patch(
        "docinsight.ocr.openai_vision_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIVisionAdapter(api_key="k", model="vision-model", timeout_seconds=30)


class TestOpenAIVisionAdapter:
    def test_sends_image_as_data_url(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("Orders 120")
        adapter = _make_adapter(mock_client)
        text = adapter.extract_text(data_base64="QUJD", mime_type="image/png", file_name="a.png")
        assert text == "Orders 120"
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "vision-model"
        parts = kwargs["messages"][0]["content"]
        assert parts[1] == {
            "type": "image_url",
            "image_url": {"url": "data:image/png;base64,QUJD"},
        }

    def test_sends_pdf_as_file_part(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("text")
        adapter = _make_adapter(mock_client)
        adapter.extract_text(data_base64="JVBE", mime_type="application/pdf", file_name="q3.pdf")
        parts = mock_client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert parts[1]["type"] == "file"
        assert parts[1]["file"]["filename"] == "q3.pdf"
        assert parts[1]["file"]["file_data"] == "data:application/pdf;base64,JVBE"

    def test_empty_content_raises(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        adapter = _make_adapter(mock_client)
        with pytest.raises(OcrError, match="empty response"):
            adapter.extract_text(data_base64="", mime_type="image/png", file_name="a.png")

    def test_no_choices_raises(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        adapter = _make_adapter(mock_client)
        with pytest.raises(OcrError, match="no choices"):
            adapter.extract_text(data_base64="", mime_type="image/png", file_name="a.png")

    def test_timeout_raises_ocr_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        adapter = _make_adapter(mock_client)
        with pytest.raises(OcrError, match="network error"):
            adapter.extract_text(data_base64="", mime_type="image/jpeg", file_name="a.jpg")

    def test_api_error_raises_ocr_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(OcrError, match="API error"):
            adapter.extract_text(data_base64="", mime_type="image/jpeg", file_name="a.jpg")


class TestExampleOcrAdapter:
    def test_returns_placeholder(self) -> None:
        text = ExampleOcrAdapter().extract_text(
            data_base64="QUJD", mime_type="image/png", file_name="a.png"
        )
        assert text == ExampleOcrAdapter.PLACEHOLDER


class TestOcrClientFactory:
    def test_creates_example_adapter(self) -> None:
        settings = Settings(ocr_provider="example")
        assert isinstance(OcrClientFactory.create(settings), ExampleOcrAdapter)

    def test_creates_openai_adapter(self) -> None:
        settings = Settings(ocr_provider="openai", ocr_api_key="k")
        assert isinstance(OcrClientFactory.create(settings), OpenAIVisionAdapter)

    def test_falls_back_to_analysis_api_key(self) -> None:
        settings = Settings(ocr_provider="openai", ocr_api_key="", analysis_api_key="shared")
        with patch("docinsight.ocr.openai_vision_adapter.openai.OpenAI") as mock_openai:
            OcrClientFactory.create(settings)
        assert mock_openai.call_args.kwargs["api_key"] == "shared"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR provider"):
            OcrClientFactory.create(Settings(ocr_provider="tesseract"))
