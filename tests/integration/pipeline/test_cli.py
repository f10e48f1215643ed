import json
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from revision_kit.cli import build_parser, main


@pytest.fixture
def docx_path(markup: SimpleNamespace, write_docx: Callable[[str, str], Path]) -> Path:
    return write_docx(
        "input.docx",
        markup.document(
            markup.run("Il gatto ")
            + markup.deletion("e")
            + markup.insertion("è")
            + markup.run(" nero."),
            '<w:del w:author="A"/>',
        ),
    )


class TestCli:
    def test_run_writes_dataset(
        self, docx_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "out"

        status = main(["run", str(docx_path), "--output-dir", str(out)])

        assert status == 0
        lines = (out / "dataset.jsonl").read_text(encoding="utf-8").splitlines()
        assert [json.loads(line) for line in lines] == [
            {"original": "Il gatto e nero.", "correction": "Il gatto è nero."}
        ]
        err = capsys.readouterr().err
        assert "Wrote 1 records" in err
        assert "Skipped 1 change group(s)" in err

    def test_extract_with_preview(
        self, docx_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "out"

        status = main(["extract", str(docx_path), "--output-dir", str(out), "--preview"])

        assert status == 0
        assert (out / "revisions_grouped.json").exists()
        assert capsys.readouterr().out.splitlines() == [
            "Paragraph 1: Il gatto è nero.",
            "Paragraph 2: ",
        ]

    def test_dataset_after_extract(self, docx_path: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        main(["extract", str(docx_path), "--output-dir", str(out)])

        status = main(["dataset", "--output-dir", str(out), "--context-words", "1"])

        assert status == 0
        record = json.loads((out / "dataset.jsonl").read_text(encoding="utf-8"))
        assert record == {"original": "gatto e nero.", "correction": "gatto è nero."}

    def test_parse_error_exits_with_status_1(
        self,
        write_docx: Callable[[str, str], Path],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_docx("bad.docx", "<not-closed>")

        status = main(["run", str(path), "--output-dir", str(tmp_path / "out")])

        assert status == 1
        assert "Invalid XML" in capsys.readouterr().err

    def test_decode_error_exits_with_status_1(self, tmp_path: Path) -> None:
        source = tmp_path / "groups.json"
        source.write_text("{", encoding="utf-8")

        status = main(
            ["dataset", "--input", str(source), "--output-dir", str(tmp_path / "out")]
        )

        assert status == 1
        assert not (tmp_path / "out" / "dataset.jsonl").exists()

    def test_missing_input_exits_with_status_1(self, tmp_path: Path) -> None:
        status = main(["extract", str(tmp_path / "nope.docx")])

        assert status == 1

    def test_rejects_negative_context_words(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["dataset", "--context-words", "-2"])

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
