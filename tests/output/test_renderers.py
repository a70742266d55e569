"""Tests for operation-specific Rich renderers."""

from skysync.output.renderers import render_result
from skysync.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="upload",
            error=ServiceError(code="CONFIG_INVALID", message="Can't use both"),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "upload" in output
        assert "Can't use both" in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure("download", "REMOTE_UNAVAILABLE", "down", locale="fr")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "locale: fr" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="upload"))


class TestUploadRenderer:
    def test_lists_files(self) -> None:
        result = _ok(
            "upload",
            files=[
                {"file": "a.en.yml", "path": "/p/a.en.yml", "code": 201},
                {"file": "admin/b.en.yml", "path": "/p/admin/b.en.yml", "code": 201},
            ],
            count=2,
            is_keeping_all_strings=True,
        )
        output = render_result(result)
        assert "Uploaded a.en.yml" in output
        assert "Uploaded admin/b.en.yml" in output
        assert "count: 2" in output

    def test_verbose_shows_codes(self) -> None:
        result = _ok(
            "upload",
            files=[{"file": "a.en.yml", "path": "/p/a.en.yml", "code": 400}],
            count=1,
            is_keeping_all_strings=False,
        )
        output = render_result(result, verbose=True)
        assert "(400)" in output
        assert "is_keeping_all_strings: False" in output


class TestDownloadRenderer:
    def _result(self) -> ServiceResult:
        return _ok(
            "download",
            mode="default",
            locales=[
                {"locale": "fr", "dir": "onesky_fr"},
                {"locale": "de", "dir": "onesky_de"},
            ],
            written=[
                {"locale": "fr", "path": "onesky_fr/a.fr.yml"},
                {"locale": "fr", "path": "onesky_fr/b.fr.yml"},
                {"locale": "de", "path": "onesky_de/a.de.yml"},
            ],
            skipped=[{"locale": "de", "file": "b.en.yml", "code": 404}],
            count=3,
        )

    def test_groups_files_under_locale_dirs(self) -> None:
        lines = [line.rstrip() for line in render_result(self._result()).splitlines()]
        fr = lines.index("onesky_fr/")
        de = lines.index("onesky_de/")
        assert lines[fr + 1].strip() == "a.fr.yml"
        assert lines[fr + 2].strip() == "b.fr.yml"
        assert lines[de + 1].strip() == "a.de.yml"
        assert fr < de

    def test_counts(self) -> None:
        output = render_result(self._result())
        assert "written: 3" in output
        assert "skipped: 1" in output

    def test_skips_only_listed_in_verbose(self) -> None:
        assert "HTTP 404" not in render_result(self._result())
        assert "b.en.yml skipped (HTTP 404)" in render_result(self._result(), verbose=True)


class TestLanguagesRenderer:
    def test_table(self) -> None:
        result = _ok(
            "languages",
            items=[
                {"code": "en", "name": "English", "is_base_language": True, "configured": True},
                {"code": "fr", "name": "French", "is_base_language": False, "configured": False},
            ],
            count=2,
        )
        output = render_result(result)
        assert "English" in output
        assert "French" in output
        assert "2 languages" in output


class TestGenericRenderer:
    def test_unknown_op_renders_fields(self) -> None:
        output = render_result(_ok("mystery", answer=42, nested={"a": 1}))
        assert "OK" in output
        assert "answer: 42" in output
        assert '{"a":1}' in output
