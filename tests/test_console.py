import os
import threading

from lc3.console import EOF, BufferedInput, StdinInput


def test_buffered_input_poll_and_consume():
    kb = BufferedInput(b"ab")
    assert kb.poll_available()
    assert kb.consume_byte() == ord("a")
    assert kb.consume_byte() == ord("b")
    assert not kb.poll_available()


def test_buffered_input_close_wakes_reader():
    kb = BufferedInput()
    got = []
    reader = threading.Thread(target=lambda: got.append(kb.consume_byte()))
    reader.start()
    kb.close()
    reader.join(timeout=5)
    assert got == [EOF]
    assert kb.consume_byte() == EOF


def test_buffered_input_drains_before_eof():
    kb = BufferedInput(b"z")
    kb.close()
    assert kb.consume_byte() == ord("z")
    assert kb.consume_byte() == EOF


def test_stdin_input_on_pipe():
    r, w = os.pipe()
    try:
        kb = StdinInput(r)
        assert not kb.poll_available()
        os.write(w, b"k")
        assert kb.poll_available()
        assert kb.consume_byte() == ord("k")
        os.close(w)
        w = None
        assert kb.consume_byte() == EOF
    finally:
        os.close(r)
        if w is not None:
            os.close(w)
