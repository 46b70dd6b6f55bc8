import logging
import os

import pytest

from tfblocks.cli import VALID_COMMANDS, build_parser, main


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("tfblocks")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.file == ""
    assert args.verbose is False
    assert args.block == "default"
    assert args.name is None
    assert args.command == "list"
    assert VALID_COMMANDS == ("list", "extract")


def test_main_without_file(caplog):
    assert main([]) == 1
    assert "No file path provided, check usage with -h" in caplog.text


def test_main_invalid_file(tmp_path, caplog):
    assert main(["-f", str(tmp_path / "does_not_exist.tf")]) == 1
    assert "Check that file exists and is of .tf type" in caplog.text


def test_main_wrong_extension(tmp_path, caplog):
    path = tmp_path / "main.txt"
    path.write_text("locals {\n}\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "is not a terraform file" in caplog.text


def test_main_lists_by_default(main_tf, capsys, caplog):
    with caplog.at_level(logging.INFO, logger="tfblocks"):
        assert main(["-f", main_tf]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "resource.aws_vpc.this",
        "resource.aws_subnet.public",
        "data.aws_availability_zones.available",
        "output.vpc_id",
    ]
    assert "Starting terraform file parser..." in caplog.text
    assert "Parsing completed" in caplog.text


def test_main_provided_list_arg(main_tf, capsys):
    assert main(["-f", main_tf, "list"]) == 0
    assert "output.vpc_id" in capsys.readouterr().out


def test_main_invalid_command(main_tf, caplog):
    assert main(["-f", main_tf, "invalid"]) == 1
    assert "Invalid command provided: invalid" in caplog.text


def test_main_extract_default_block_is_an_error(main_tf, caplog):
    assert main(["-f", main_tf, "extract"]) == 1
    assert "No 'default' blocks found" in caplog.text
    assert not os.path.exists(os.path.join(os.path.dirname(main_tf), "default.tf"))


def test_main_extract_locals(main_tf):
    assert main(["-f", main_tf, "-b", "locals", "extract"]) == 0
    target = os.path.join(os.path.dirname(main_tf), "locals.tf")
    with open(target, encoding="utf-8") as f:
        assert f.read().count("locals {") == 2


def test_main_extract_named_entry(main_tf):
    assert main(["-f", main_tf, "-b", "output", "-n", "vpc_id", "extract"]) == 0
    target = os.path.join(os.path.dirname(main_tf), "output.tf")
    with open(target, encoding="utf-8") as f:
        assert f.read() == 'output "vpc_id" {\n  value = aws_vpc.this.id\n}\n'


def test_main_verbose_level(main_tf, caplog):
    with caplog.at_level(logging.DEBUG, logger="tfblocks"):
        assert main(["-v", "-f", main_tf]) == 0
        assert logging.getLogger("tfblocks").level == logging.DEBUG
    assert "Found resource block :: aws_vpc.this at lines 11 to 19" in caplog.text


def test_main_default_level_is_info(main_tf):
    assert main(["-f", main_tf]) == 0
    assert logging.getLogger("tfblocks").level == logging.INFO


def test_main_lists_directory(tmp_path, main_tf, capsys):
    (tmp_path / "extra.tf").write_text('variable "cidr" {\n}\n', encoding="utf-8")
    assert main(["-f", str(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "variable.cidr" in out
    assert "resource.aws_vpc.this" in out


def test_main_extract_rejects_directory(tmp_path, main_tf, caplog):
    assert main(["-f", str(tmp_path), "-b", "locals", "extract"]) == 1
    assert "needs a single file" in caplog.text


def test_main_unreadable_line_length(tmp_path, caplog):
    path = tmp_path / "big.tf"
    path.write_text("A" * (1024 * 1024), encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "exceeds" in caplog.text


def test_main_extract_into_own_input_is_refused(tmp_path, caplog):
    source = tmp_path / "locals.tf"
    original = 'locals {\n}\nresource "a" "b" {\n}\n'
    source.write_text(original, encoding="utf-8")

    assert main(["-f", str(source), "-b", "locals", "extract"]) == 1
    assert "Refusing to overwrite the input file" in caplog.text
    assert source.read_text(encoding="utf-8") == original


def test_main_extract_locals_with_name_is_an_error(main_tf, caplog):
    assert main(["-f", main_tf, "-b", "locals", "-n", "x", "extract"]) == 1
    assert "have no names" in caplog.text
    assert not os.path.exists(os.path.join(os.path.dirname(main_tf), "locals.tf"))
