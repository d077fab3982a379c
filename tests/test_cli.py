from typer.testing import CliRunner

from metric_bktree.cli.main import app

runner = CliRunner()


def test_query_search(word_file):
    result = runner.invoke(app, ["query", "search", "sort", "--words", str(word_file), "--radius", "2"])
    assert result.exit_code == 0, result.output
    lines = [l for l in result.output.splitlines() if l]
    assert lines[0] == "1\tsoft"
    assert sorted(lines[1:]) == ["2\tsoda", "2\tsome"]


def test_query_search_multiple(word_file):
    result = runner.invoke(app, ["query", "search", "sort", "mile", "--words", str(word_file), "--radius", "1"])
    assert result.exit_code == 0, result.output
    assert "# sort" in result.output
    assert "# mile" in result.output
    assert "1\tmole" in result.output


def test_query_search_config(word_file, tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("tree:\n  metric: hamming\n  radius: 1\n", encoding="utf-8")
    result = runner.invoke(app, ["query", "search", "sofa", "--words", str(word_file), "--config", str(cfg)])
    assert result.exit_code == 0, result.output
    assert "1\tsoft" in result.output
    assert "1\tsoda" in result.output
    assert "some" not in result.output


def test_query_nearest(word_file):
    result = runner.invoke(app, ["query", "nearest", "sort", "--words", str(word_file)])
    assert result.exit_code == 0, result.output
    assert "1\tsoft" in result.output

    result = runner.invoke(app, ["query", "nearest", "xxxxxxxx", "--words", str(word_file), "--max-distance", "1"])
    assert result.exit_code == 1


def test_query_distance():
    result = runner.invoke(app, ["query", "distance", "test", "TEST", "--metric", "hamming"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4"

    result = runner.invoke(app, ["query", "distance", "test", "TEST", "--metric", "hamming", "--ignore-case"])
    assert result.output.strip() == "0"


def test_unknown_metric(word_file):
    result = runner.invoke(app, ["query", "search", "sort", "--words", str(word_file), "--metric", "jaccard"])
    assert result.exit_code != 0


def test_spell_sentence(word_file):
    result = runner.invoke(app, ["spell", "sentence", "the sofa is soft.", "--words", str(word_file)])
    assert result.exit_code == 0, result.output
    assert "the soda is soft." in result.output
