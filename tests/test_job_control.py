"""Tests for waiting on a batch's processes."""

import os
import signal
import threading

import psutil

from wish.job_control import ProcessTable


class TestWaitAll:

    def test_nothing_to_wait_for(self):
        assert ProcessTable().wait_all() == {}

    def test_collects_every_status(self):
        table = ProcessTable()
        for argv in (["/bin/sleep", "0.2"], ["/bin/sh", "-c", "exit 3"]):
            table.add(psutil.Popen(argv), " ".join(argv))
        assert sorted(table.wait_all().values()) == [0, 3]
        assert table.wait_all() == {}

    def test_ctrl_c_keeps_waiting(self, capsys):
        """SIGINT to the shell does not abort the wait or kill the shell."""
        before = signal.getsignal(signal.SIGINT)
        table = ProcessTable()
        proc = psutil.Popen(["/bin/sleep", "0.5"])
        table.add(proc, "sleep 0.5")

        timer = threading.Timer(0.1, os.kill, (os.getpid(), signal.SIGINT))
        timer.start()
        try:
            assert table.wait_all() == {proc.pid: 0}
        finally:
            timer.cancel()

        assert capsys.readouterr().out == "\n"
        assert signal.getsignal(signal.SIGINT) is before
