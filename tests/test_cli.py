import io
import json

from recipe_import_core import cli


def test_cli_writes_json_and_markdown(tmp_path, pizza_sheet, capsys):
    source = tmp_path / "pizza.tsv"
    source.write_text(pizza_sheet, encoding="utf-8")
    out_dir = tmp_path / "out"

    exit_code = cli.main([str(source), "--out", str(out_dir), "--profile", "summary"])

    assert exit_code == 0
    document = json.loads((out_dir / "margherita-pizza.json").read_text(encoding="utf-8"))
    assert document["recipe"]["name"] == "Margherita Pizza"
    assert document["warnings"] == []
    assert document["is_complete"] is True
    assert document["missing_for_save"] == ["daysAvailable"]

    md = (out_dir / "margherita-pizza.md").read_text(encoding="utf-8")
    assert md.startswith("# Margherita Pizza")
    assert "daysAvailable" in capsys.readouterr().out


def test_cli_reads_stdin_and_names_unnamed_recipe(tmp_path, make_sheet, monkeypatch):
    text = make_sheet(
        ["Station", "Grill"],
        ["2. Ingredients"],
        ["Beef", "200", "GM"],
        ["4. Step-by-Step Preparation"],
        ["1", "Grill the beef"],
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(text))

    exit_code = cli.main(["--stdin", "--out", str(tmp_path)])

    assert exit_code == 0
    document = json.loads((tmp_path / "recipe.json").read_text(encoding="utf-8"))
    assert document["is_complete"] is False
    assert (tmp_path / "recipe.md").exists()


def test_cli_fails_on_short_input(tmp_path, capsys):
    source = tmp_path / "short.tsv"
    source.write_text("Recipe Name\tPasta\n", encoding="utf-8")

    exit_code = cli.main([str(source), "--out", str(tmp_path / "out")])

    assert exit_code == 1
    assert not (tmp_path / "out").exists()
    assert "at least 5" in capsys.readouterr().err
