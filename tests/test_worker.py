import threading

import pytest

from dspractice.worker import ThreadStatus, Worker


class RecordingWorker(Worker):
    def __init__(self):
        super().__init__()
        self.seen_status = None
        self.seen_ident = None
        self.calls = 0

    def run(self):
        self.calls += 1
        self.seen_status = self.status
        self.seen_ident = threading.get_ident()


class BlockingWorker(Worker):
    def __init__(self):
        super().__init__()
        self.release = threading.Event()

    def run(self):
        self.release.wait(5)

    def stop(self):
        self.release.set()


def test_new_worker_is_ready():
    worker = Worker()
    assert worker.status is ThreadStatus.READY
    assert worker.tid is None


def test_run_sees_running_status_and_ends_in_exit():
    worker = RecordingWorker()
    Worker.start(worker)
    assert Worker.join(worker, 5) is True
    assert worker.seen_status is ThreadStatus.RUNNING
    assert worker.status is ThreadStatus.EXIT
    assert worker.calls == 1


def test_tid_is_the_thread_ident():
    worker = RecordingWorker()
    Worker.start(worker)
    assert Worker.join(worker, 5) is True
    assert worker.tid == worker.seen_ident
    assert worker.tid != threading.get_ident()


def test_second_start_is_rejected():
    worker = RecordingWorker()
    Worker.start(worker)
    Worker.join(worker, 5)
    with pytest.raises(RuntimeError):
        Worker.start(worker)
    assert worker.calls == 1


def test_join_before_start_raises():
    with pytest.raises(RuntimeError):
        Worker().join(0)


def test_join_times_out_while_running_then_stop_finishes():
    worker = BlockingWorker()
    Worker.start(worker)
    assert Worker.join(worker, 0.05) is False
    worker.stop()
    assert Worker.join(worker, 5) is True
    assert worker.status is ThreadStatus.EXIT


def test_default_run_finishes_immediately():
    worker = Worker()
    worker.start()
    assert worker.join(5) is True
    assert worker.status is ThreadStatus.EXIT