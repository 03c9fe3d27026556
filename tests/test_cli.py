from ftlex.cli import main


def test_main_prints_strings(tmp_path, capsys):
    path = tmp_path / "spec.l"
    path.write_text('%%\n"abc" { }\n"def" { }\n%%\n', encoding="utf-8")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "abc\ndef\n"


def test_main_no_strings(tmp_path, capsys):
    path = tmp_path / "spec.l"
    path.write_text("%%\n[a-z]+ { }\n%%\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_unclosed_string(tmp_path, capsys):
    path = tmp_path / "spec.l"
    path.write_text('%%\n"abc { }', encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "no closing quote" in captured.err
    assert captured.out == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.l")]) == 1
    assert "Error" in capsys.readouterr().err