import pytest

from openixcard import log


@pytest.mark.parametrize(
    "func, tag",
    [
        (log.info, "[OpenixCard INFO] "),
        (log.debug, "[OpenixCard DEBUG] "),
        (log.warning, "[OpenixCard WARNING] "),
        (log.error, "[OpenixCard ERROR] "),
    ],
)
def test_tagged_messages(capsys, func, tag):
    func("hello world")
    out = capsys.readouterr().out
    assert tag + "hello world" in out
    assert out.startswith("\x1b[")
    assert out.endswith("\x1b[0m\n")


def test_data_has_no_tag(capsys):
    log.data("Partition Table: ")
    out = capsys.readouterr().out
    assert "[OpenixCard" not in out
    assert "Partition Table: " in out
    assert out.count("\n") == 1


def test_levels_use_distinct_colours(capsys):
    log.info("m")
    info_out = capsys.readouterr().out
    log.error("m")
    error_out = capsys.readouterr().out
    assert info_out.split("[", 2)[1] != error_out.split("[", 2)[1]