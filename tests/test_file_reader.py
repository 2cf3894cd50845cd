from tinyhttpd.file_reader import read_file


def test_can_read_file(tmp_path):
    path = tmp_path / "myfile.txt"
    path.write_text("abcdefg\nhijk\n")
    assert read_file(path)[:3] == "abc"


def test_whole_content_round_trip(tmp_path):
    path = tmp_path / "page.html"
    text = "<html>\r\n<body>hello</body>\r\n</html>\n"
    path.write_bytes(text.encode("utf-8"))
    assert read_file(str(path)) == text


def test_missing_file_gives_empty_string(tmp_path):
    assert read_file(tmp_path / "missing.txt") == ""


def test_stops_at_nul(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc\0def")
    assert read_file(path) == "abc"