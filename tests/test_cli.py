from mtp.__main__ import main


def test_runs_on_packaged_ciphertexts(capsys, recwarn):
    assert main([]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Cracked encryption key b'")
    assert len(lines) == 1 + 9
    assert lines[-1].startswith("Cracked message (8) : b'")


def test_runs_on_given_ciphertexts(capsys):
    assert main(['000000', '000000']) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Cracked encryption key b'AAA'",
        "Cracked message (0) : b'AAA'",
        "Cracked message (1) : b'AAA'",
    ]


def test_custom_marker(capsys):
    assert main(['--marker', '32', '0000', '0000']) == 0

    assert capsys.readouterr().out.splitlines()[0] == "Cracked encryption key b'  '"


def test_decode_failure_exits_nonzero(capsys):
    assert main(['0000', '0g00']) == 1
    assert main(['000']) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Invalid hex string' in captured.err
