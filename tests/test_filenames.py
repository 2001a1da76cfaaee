import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notekeeper.core.filenames import check_file_name, title_to_stem


def test_stem_keeps_ordinary_titles():
    assert title_to_stem("New Note") == "New Note"
    assert title_to_stem("Meeting: Monday?") == "Meeting: Monday?"
    assert title_to_stem("Заметка") == "Заметка"


def test_stem_replaces_separators():
    assert title_to_stem("Q1/Q2 plan") == "Q1-Q2 plan"
    assert title_to_stem("a\\b") == "a-b"
    assert title_to_stem("../up") == "..-up"


def test_stem_drops_control_characters():
    assert title_to_stem("tab\there\n") == "tabhere"


def test_stem_of_nothing():
    assert title_to_stem(None) == ""
    assert title_to_stem("") == ""


def test_stems_always_pass_the_check():
    for title in ("Q1/Q2 plan", "../up", "x\x00y", "line\nbreak"):
        assert check_file_name(f"{title_to_stem(title)}.json") is None


def test_check_accepts_plain_names():
    assert check_file_name("New Note.json") is None
    assert check_file_name("Meeting: Monday.json") is None


def test_check_rejects_escaping_names():
    assert check_file_name("../secret.json")
    assert check_file_name("sub/note.json")
    assert check_file_name("sub\\note.json")
    assert check_file_name("..")
    assert check_file_name(".")


def test_check_rejects_blank_and_control_chars():
    assert check_file_name("")
    assert check_file_name("   ")
    assert check_file_name(None)
    assert check_file_name("bad\nname.json")
