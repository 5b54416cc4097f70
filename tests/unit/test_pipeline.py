"""Tests for the end-to-end report run."""

from pathlib import Path

import pytest

from pitchscan.config import RenderMode, Settings
from pitchscan.exceptions import ConfigurationError, FetchTimeoutError
from pitchscan.pipeline import generate_report, run, write_report
from tests.fixtures import FailingSource, StaticSource, make_html


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "target_url": "https://rorlegger.example/",
        "report_path": tmp_path / "SALGS-RAPPORT.txt",
        "render_mode": RenderMode.STATIC,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestGenerateReport:
    """Tests for generate_report function."""

    @pytest.mark.asyncio
    async def test_builds_report_from_fetched_page(self, local_business_html: str) -> None:
        source = StaticSource(local_business_html, final_url="https://www.rorlegger.example/")

        report = await generate_report("https://rorlegger.example/", source)

        assert source.requested == ["https://rorlegger.example/"]
        assert report.startswith("Del 1\n")
        # The requested URL is reported, not the redirect target
        assert "(https://rorlegger.example/)" in report
        assert "100 / 100 (høy)" in report

    @pytest.mark.asyncio
    async def test_english(self, local_business_html: str) -> None:
        report = await generate_report(
            "https://rorlegger.example/", StaticSource(local_business_html), language="en"
        )

        assert "100 / 100 (high)" in report


class TestRun:
    """Tests for run function."""

    @pytest.mark.asyncio
    async def test_writes_report_file(self, tmp_path: Path, local_business_html: str) -> None:
        settings = make_settings(tmp_path)

        path = await run(settings, source=StaticSource(local_business_html))

        assert path == tmp_path / "SALGS-RAPPORT.txt"
        content = path.read_text(encoding="utf-8")
        assert content.startswith("Del 1\n")
        assert "Rørlegger Raufoss" in content

    @pytest.mark.asyncio
    async def test_replaces_existing_file(self, tmp_path: Path) -> None:
        settings = make_settings(tmp_path)
        settings.report_path.write_text("gammel rapport", encoding="utf-8")

        await run(settings, source=StaticSource(make_html(body="<h1>Maler</h1>")))

        assert "gammel rapport" not in settings.report_path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_missing_target_url(self, tmp_path: Path) -> None:
        source = StaticSource(make_html())
        settings = make_settings(tmp_path, target_url=None)

        with pytest.raises(ConfigurationError) as exc_info:
            await run(settings, source=source)

        assert exc_info.value.details == {"setting": "TARGET_URL"}
        assert source.requested == []
        assert not settings.report_path.exists()

    @pytest.mark.asyncio
    async def test_fetch_error_writes_nothing(self, tmp_path: Path) -> None:
        source = FailingSource(FetchTimeoutError("https://rorlegger.example/"))
        settings = make_settings(tmp_path)

        with pytest.raises(FetchTimeoutError):
            await run(settings, source=source)

        assert source.calls == 1
        assert not settings.report_path.exists()

    @pytest.mark.asyncio
    async def test_uses_configured_source(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        source = StaticSource(make_html(body="<h1>Maler</h1>"))
        monkeypatch.setattr("pitchscan.pipeline.get_html_source", lambda settings: source)

        await run(make_settings(tmp_path))

        assert source.requested == ["https://rorlegger.example/"]


def test_write_report_is_utf8(tmp_path: Path) -> None:
    path = write_report("Søkeord – høy", tmp_path / "rapport.txt")

    assert path.read_bytes() == "Søkeord – høy".encode()
