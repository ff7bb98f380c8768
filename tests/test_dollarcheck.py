import io

from labkit.dollarcheck import find_dollar, main


def test_finds_first_dollar_line():
    assert find_dollar(io.StringIO("ab\ncd$\n$\n")) == 2


def test_dollar_on_first_line():
    assert find_dollar(io.StringIO("$")) == 1


def test_no_dollar():
    assert find_dollar(io.StringIO("plain\ntext\n")) is None


def test_empty_stream():
    assert find_dollar(io.StringIO("")) is None


def test_main_reports_dollar(tmp_path, capsys):
    path = tmp_path / "myfile.in"
    path.write_text("one\ntwo\nth$ree\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "illegal dollar sign in line 3\n"


def test_main_clean_file(tmp_path, capsys):
    path = tmp_path / "myfile.in"
    path.write_text("clean\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.in")]) == 0
    assert "Error opening file." in capsys.readouterr().err