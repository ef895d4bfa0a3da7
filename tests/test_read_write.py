from line_record_stream import LineRecordStream, Mode

COLUMNS = ["my", "test", "is", "awesome"]


def write_lines(path, text):
    path.write_bytes(text.encode("utf-8"))


def test_read_one_line_one_column(tmp_path):
    path = tmp_path / "contacts_with_one_col.csv"
    write_lines(path, "Shelby Macias\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() == ["Shelby Macias"]
        assert stream.read() is None


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty_contacts_file.csv"
    write_lines(path, "")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() is None
        # Stays at end of stream
        assert stream.read() is None


def test_empty_line_is_not_end_of_stream(tmp_path):
    path = tmp_path / "gaps.csv"
    write_lines(path, "\n\nlast")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() == [""]
        assert stream.read() == [""]
        # Last line without terminator
        assert stream.read() == ["last"]
        assert stream.read() is None


def test_read_crlf_lines(tmp_path):
    path = tmp_path / "windows.csv"
    write_lines(path, "a\tb\r\nc\td\r\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert list(stream) == [["a", "b"], ["c", "d"]]


def test_read_skips_utf8_byte_order_mark(tmp_path):
    path = tmp_path / "notepad.csv"
    path.write_bytes(b"\xef\xbb\xbfShelby\tMacias\nCharde\tLloyd\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() == ["Shelby", "Macias"]
        assert stream.read() == ["Charde", "Lloyd"]


def test_read_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"caf\xe9\tcr\xe8me\nplain\tascii\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() == ["caf\ufffd", "cr\ufffdme"]
        # Reading carries on past the bad line
        assert stream.read() == ["plain", "ascii"]


def test_read_with_newline_separator(tmp_path):
    path = tmp_path / "contacts.csv"
    write_lines(path, "Shelby Macias\t3027 Lorem St.\tKokomo\nCharde Lloyd\t1103 Pellentesque Rd\tStrasbourg\n")
    with LineRecordStream("\n") as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read() == ["Shelby Macias\t3027 Lorem St.\tKokomo"]


def test_write_default_separator(tmp_path):
    path = tmp_path / "contacts_out.csv"
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.WRITE)
        for _ in range(10):
            stream.write(COLUMNS)
        stream.close()

        stream.open(str(path), Mode.READ)
        assert stream.read() == COLUMNS

    assert path.read_text(encoding="utf-8") == "my\ttest\tis\tawesome\n" * 10


def test_write_then_read_full_file(tmp_path):
    path = tmp_path / "contacts_out.csv"
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.WRITE)
        n = stream.write_records([COLUMNS] * 7)
        assert n == 7
        stream.close()

        stream.open(str(path), Mode.READ)
        records = list(stream)
    assert len(records) == 7
    assert all(len(r) == 4 for r in records)


def test_round_trip_with_custom_separator(tmp_path):
    path = tmp_path / "pipes.csv"
    rows = [[f"r{i}c{j}" for j in range(3)] for i in range(5)]
    with LineRecordStream("|") as stream:
        stream.open(str(path), Mode.WRITE)
        for row in rows:
            stream.write(row)
        stream.close()
        stream.open(str(path), Mode.READ)
        assert list(stream) == rows
    assert path.read_text(encoding="utf-8").splitlines()[0] == "r0c0|r0c1|r0c2"


def test_write_with_newline_separator_splits_fields_into_records(tmp_path):
    path = tmp_path / "contacts_out.csv"
    with LineRecordStream("\n", "\n") as stream:
        stream.open(str(path), Mode.WRITE)
        stream.write(["a", "b", "c", "d"])
        stream.close()

        stream.open(str(path), Mode.READ)
        assert list(stream) == [["a"], ["b"], ["c"], ["d"]]


def test_independent_separators(tmp_path):
    path = tmp_path / "mixed.csv"
    with LineRecordStream(",", ";") as stream:
        stream.open(str(path), Mode.WRITE)
        stream.write(["a,b", "c"])
        stream.close()
        stream.open(str(path), Mode.READ)
        # Written with ';', re-read with ','
        assert stream.read() == ["a", "b;c"]


def test_write_single_and_empty_fields(tmp_path):
    path = tmp_path / "edge.csv"
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.WRITE)
        stream.write(["only"])
        stream.write([])
        stream.write(["", ""])
    assert path.read_text(encoding="utf-8") == "only\n\n\t\n"


def test_read_pair(tmp_path):
    path = tmp_path / "pairs.csv"
    write_lines(path, "my\ttest\tis\tawesome\nlonely\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        # Columns 3 and 4 are dropped
        assert stream.read_pair() == (True, "my", "test")
        assert stream.read_pair() == (True, "lonely", None)
        assert stream.read_pair() == (False, None, None)


def test_read_pair_empty_line(tmp_path):
    path = tmp_path / "blank.csv"
    write_lines(path, "\n")
    with LineRecordStream() as stream:
        stream.open(str(path), Mode.READ)
        assert stream.read_pair() == (True, "", None)
