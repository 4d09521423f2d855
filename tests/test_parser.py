from minish.parser import Command, Redirect, detect_redirects, has_pipe


def test_has_pipe_true_for_lone_pipe():
    assert has_pipe(["ls", "|", "wc"]) is True


def test_has_pipe_false_when_pipe_inside_token():
    assert has_pipe(["echo", "'a|b'"]) is False
    assert has_pipe([]) is False


def test_detect_redirects_output():
    assert detect_redirects(["ls", ">", "f"]) == Redirect(in_=1, out=0)
    assert detect_redirects(["ls", ">>", "f"]) == Redirect(in_=2, out=0)


def test_detect_redirects_input():
    assert detect_redirects(["cat", "<", "f"]) == Redirect(in_=0, out=1)
    assert detect_redirects(["cat", "<<", "EOF"]) == Redirect(in_=0, out=2)


def test_detect_redirects_none():
    assert detect_redirects(["echo", "hello"]) == Redirect()


def test_detect_redirects_last_wins():
    result = detect_redirects(["a", ">>", "x", ">", "y", "<<", "z", "<", "w"])
    assert result == Redirect(in_=1, out=1)


def test_next_node_without_pipe():
    cmd = Command(line="ls", tokens=["ls"])
    assert cmd.next_node() is None
    assert cmd.pipe is False
    assert cmd.next is None


def test_next_node_creates_once():
    cmd = Command(line="ls | wc", tokens=["ls", "|", "wc"])
    first = cmd.next_node()
    assert cmd.pipe is True
    assert first is cmd.next
    assert first.tokens == []
    assert cmd.next_node() is first