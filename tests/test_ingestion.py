import pytest

from learnhub.models import ContentType
from learnhub.services import ingestion
from learnhub.utils.errors import InvalidVideoUrlError, MissingContentSourceError


@pytest.mark.parametrize("url", [
    "https://youtube.com/watch?v=ABC123",
    "https://youtu.be/ABC123",
    "https://youtube.com/embed/ABC123",
    "https://www.youtube.com/watch?v=ABC123&t=42s",
])
def test_extract_video_id_accepts_known_shapes(url):
    assert ingestion.extract_video_id(url) == "ABC123"


def test_extract_video_id_rejects_other_hosts():
    assert ingestion.extract_video_id("https://example.com") is None


def test_youtube_summary_names_video():
    summary = ingestion.ingest(ContentType.YOUTUBE, "https://youtu.be/xyz789")

    assert summary.startswith("Educational Content Summary for YouTube Video (xyz789):")


def test_invalid_youtube_url_raises():
    with pytest.raises(InvalidVideoUrlError):
        ingestion.ingest("youtube", "https://example.com/video")


def test_pdf_summary_previews_first_200_chars():
    text = "a" * 200 + "b" * 50
    summary = ingestion.ingest(ContentType.PDF, text)

    assert summary.startswith("PDF Content Analysis:")
    assert summary.endswith("Content preview: " + "a" * 200 + "...")
    assert "b" not in summary.split("Content preview: ")[1]


def test_website_is_placeholder_only():
    assert ingestion.ingest("website", "https://docs.python.org") == \
        "Website content from https://docs.python.org"


def test_missing_payload_is_rejected():
    with pytest.raises(MissingContentSourceError):
        ingestion.ingest(ContentType.WEBSITE, "")
