import pytest

import coxeter_cd.__main__ as cli


def test_main_prints_geometry(capsys):
    cli.main(['x3o3o'])
    out = capsys.readouterr().out
    assert 'Diagram: x3o3o' in out
    assert 'Canonical: x3o3o' in out
    assert 'Coxeter matrix:\n[1, 3, 2]\n[3, 1, 3]\n[2, 3, 1]' in out
    assert 'Circumradius: 0.612372' in out
    assert 'Generator: [' in out


def test_main_reports_missing_geometry(capsys):
    cli.main(['x7o3o'])
    out = capsys.readouterr().out
    assert 'Normals:\nnone' in out
    assert 'Circumradius: none' in out
    assert 'Generator: none' in out


def test_main_exits_on_parse_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['x3o', '(1.0'])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert 'Diagram: x3o\nCanonical: x3o' in out
    assert 'Error: [index 4] unclosed parenthesis' in out
    assert '    (1.0\n        ^' in out


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / 'diagrams.txt'
    path.write_text('# polygons\nx5o\n\nx6o\n', encoding='utf-8')
    cli.main(['--file', str(path)])
    out = capsys.readouterr().out
    assert out.count('Diagram: ') == 2
    assert 'Diagram: x6o' in out


def test_main_requires_a_diagram(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_main_survives_diagram_without_notation(capsys):
    cli.main(['x' + '3o' * 30 + ' *c3o3*d'])
    out = capsys.readouterr().out
    assert 'Canonical: none' in out
    assert 'Coxeter matrix:' in out


def test_main_rejects_infinite_literal(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['(1e999)3o'])
    assert excinfo.value.code == 1
    assert 'Error: [index 6]' in capsys.readouterr().out
