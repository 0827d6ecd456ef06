"""Integration tests for the render, tree and classes commands"""

from typer.testing import CliRunner

from mdsection.cli.cli import app


runner = CliRunner()


def test_render_cmd_writes_html(tmp_path, monkeypatch):
    """render produces one .html file per markdown input."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hello.md").write_text("# Hello\n\nWorld\n")

    result = runner.invoke(app, ["render", "hello.md", "--out-dir", str(tmp_path / "dist")])

    assert result.exit_code == 0, result.output
    html = (tmp_path / "dist" / "hello.html").read_text()
    assert html.startswith('<section class="section-h1">\n<h1>Hello</h1>')
    assert "Rendered 1 document(s)" in result.output


def test_render_cmd_class_flags(tmp_path, monkeypatch):
    """Class flags override the defaults."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hello.md").write_text("## Hello\n")

    result = runner.invoke(app, [
        "render", "hello.md", "--out-dir", "out",
        "--no-section-class", "--heading-class", "--prefix", "x-", "--custom-class", "wide",
    ])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "hello.html").read_text().startswith('<section class="h2 x-h2 wide">')


def test_render_cmd_uses_config_yaml(tmp_path, monkeypatch):
    """config.yaml in the working directory supplies defaults."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("custom_class: from-yaml\noutput_dir: site\n")
    (tmp_path / "a.md").write_text("# A\n")

    result = runner.invoke(app, ["render", "a.md"])

    assert result.exit_code == 0, result.output
    assert 'class="section-h1 from-yaml"' in (tmp_path / "site" / "a.html").read_text()


def test_render_cmd_no_files(tmp_path, monkeypatch):
    """render exits 1 when nothing matches."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["render", "."])
    assert result.exit_code == 1
    assert "No .md/.mdx files found" in result.output


def test_render_cmd_bad_config(tmp_path, monkeypatch):
    """An invalid config.yaml is reported and exits 1."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    (tmp_path / "a.md").write_text("# A\n")
    result = runner.invoke(app, ["render", "a.md"])
    assert result.exit_code == 1


def test_tree_cmd(tmp_path):
    """tree prints the grouped outline."""
    f = tmp_path / "doc.md"
    f.write_text("# A\n\n### B\n\n## C\n")
    result = runner.invoke(app, ["tree", str(f)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "Document",
        "  Section(level=1)",
        '    Heading(level=1) "A"',
        "    Section(level=3)",
        '      Heading(level=3) "B"',
        "    Section(level=2)",
        '      Heading(level=2) "C"',
    ]


def test_tree_cmd_missing_file(tmp_path):
    """tree exits 1 for a file that does not exist."""
    result = runner.invoke(app, ["tree", str(tmp_path / "missing.md")])
    assert result.exit_code == 1


def test_classes_cmd():
    """classes prints the computed class string."""
    result = runner.invoke(app, ["classes", "3", "--heading-class", "--custom-class", "wide"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "section-h3 h3 wide"
