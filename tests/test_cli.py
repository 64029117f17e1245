'''
Command line tests
'''

from rpn4.cli import CLI, InteractiveInput


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_expression(capsys):
    out, err = run(capsys, '-e', '3', '4', '+')
    assert out == '0\n0\n0\n7\n\n'
    assert err == ''


def test_expression_is_one_line(capsys):
    out, _ = run(capsys, '-e', '1 2 3 4 5')
    assert out == '1\n2\n3\n4\n5\n'


def test_separator(capsys):
    out, _ = run(capsys, '-s', ',', '-e', '1,5 ')
    assert out == '0\n0\n0\n1,5\n\n'


def test_lex_error_aborts_line(capsys):
    out, err = run(capsys, '-e', '1 q 2')
    assert out == '0\n0\n0\n1\n\n'
    assert err == "Couldn't lex q 2\n"


def test_parse_error(capsys):
    out, err = run(capsys, '-e', '_ +')
    assert out == '0\n0\n0\n0\n-\n'
    assert err == "Cannot convert '-'\n"


def test_verbose_parse_error(capsys):
    _, err = run(capsys, '-v', '-e', '_ +')
    assert 'Traceback' in err
    assert err.endswith("Cannot convert '-'\n")


def test_dump(capsys):
    out, _ = run(capsys, '-D', '-e', '1.5π')
    assert out == ("<key>\t<repr(lexeme)>\n"
                   "digit\t'1'\n"
                   "separator\t'.'\n"
                   "digit\t'5'\n"
                   "operator\t'π'\n")


def test_toolbar_shows_registers(loaded):
    toolbar = InteractiveInput('> ', loaded).toolbar()
    assert toolbar == 'T: 4  Z: 3  Y: 2  X: 1'
