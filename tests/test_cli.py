from tifinagh.cli import main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "Provide text to transliterate to Tifinagh\n"


def test_transliterates_first_argument(capsys):
    assert main(["azul"]) == 0
    assert capsys.readouterr().out == "ⴰⵣⵓⵍ\n"


def test_only_first_argument_is_used(capsys):
    assert main(["azul", "tamazight"]) == 0
    assert capsys.readouterr().out == "ⴰⵣⵓⵍ\n"


def test_unmapped_text_passes_through(capsys):
    assert main(["123"]) == 0
    assert capsys.readouterr().out == "123\n"


def test_empty_argument_prints_empty_line(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == "\n"