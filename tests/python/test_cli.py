import logging

import pytest

import blockmat
from blockmat import cli


@pytest.fixture(autouse=True)
def _reset_blockmat_logger():
    yield
    logger = logging.getLogger("blockmat")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_cli_pretty_output(capsys):
    rc = cli.main(["--a-shape", "3", "4", "--b-shape", "4", "2", "--block", "2", "3", "--seed", "1"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Matrix(shape=(3, 2))" in out
    assert out.rstrip().endswith("ok")


def test_cli_serialized_output_matches_flat_product(capsys):
    args = ["--a-shape", "5", "3", "--b-shape", "3", "4", "--block", "2", "2", "--seed", "7"]
    rc = cli.main(args + ["--output", "serialized"])
    out = capsys.readouterr().out
    assert rc == 0

    text = out[: out.rindex("ok")]
    a = blockmat.random_matrix(5, 3, 10, 20, seed=7)
    b = blockmat.random_matrix(3, 4, 10, 20, seed=8)
    assert blockmat.deserialize(text) == a.multiply(b)


def test_cli_verify_and_show_partition(capsys):
    rc = cli.main(
        ["--a-shape", "6", "5", "--b-shape", "5", "7", "--block", "4", "4", "--verify", "--show-partition"]
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert "MatrixPartition(grid=2x2)" in out
    assert "FAIL" not in out


def test_cli_incompatible_shapes(capsys):
    rc = cli.main(["--a-shape", "2", "3", "--b-shape", "2", "3"])
    captured = capsys.readouterr()
    assert rc == 2
    assert captured.err.startswith("error: ")


def test_cli_invalid_block_size(capsys):
    rc = cli.main(["--block", "0", "2"])
    assert rc == 2
    assert "max_block_rows" in capsys.readouterr().err


def test_cli_rejects_unknown_log_level():
    with pytest.raises(SystemExit) as info:
        cli.main(["--log-level", "chatty"])
    assert info.value.code == 2


def test_cli_logs_progress(capsys):
    rc = cli.main(["--a-shape", "2", "2", "--b-shape", "2", "2", "--log-level", "INFO"])
    captured = capsys.readouterr()
    assert rc == 0
    assert "blockmat.cli - INFO - generated A 2x2 and B 2x2" in captured.err
    assert "INFO" not in captured.out


def test_cli_serialized_output_stays_parseable_with_logging(capsys):
    rc = cli.main(
        ["--a-shape", "2", "2", "--b-shape", "2", "2", "--seed", "3", "--output", "serialized", "--log-level", "INFO"]
    )
    captured = capsys.readouterr()
    assert rc == 0
    assert captured.out.startswith("2 2\n")
    text = captured.out[: captured.out.rindex("ok")]
    assert blockmat.deserialize(text).shape == (2, 2)
    assert "generated A 2x2" in captured.err
