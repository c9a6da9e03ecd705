import pytest

from data_compare import Format, detect_format


class TestDetectByContent:

    @pytest.mark.parametrize("text, expected", [
        ('{"a":1}', Format.JSON),
        ("  \n[1, 2, 3]", Format.JSON),
        ("a,b\n1,2", Format.CSV),
        ("public class Foo {}", Format.JAVA),
        ("private int x;", Format.JAVA),
        ("hello world", Format.TEXT),
        ("", Format.TEXT),
    ])
    def test_heuristics(self, text, expected):
        assert detect_format(text) is expected

    def test_json_wins_over_csv(self):
        assert detect_format('[1,\n2]') is Format.JSON

    def test_csv_wins_over_java(self):
        assert detect_format("public,class \nx,y") is Format.CSV

    def test_comma_without_newline_is_not_csv(self):
        assert detect_format("a,b,c") is Format.TEXT


class TestDetectByFilename:

    def test_excel_extension_ignores_content(self):
        assert detect_format('{"a":1}', "x.xlsx") is Format.EXCEL
        assert detect_format("", "old.XLS") is Format.EXCEL

    def test_csv_and_java_extensions(self):
        assert detect_format("hello", "data.csv") is Format.CSV
        assert detect_format("hello", "Main.java") is Format.JAVA

    def test_unknown_extension_falls_back_to_content(self):
        assert detect_format('{"a":1}', "data.json") is Format.JSON
        assert detect_format("hello", "notes.txt") is Format.TEXT
