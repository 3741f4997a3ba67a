"""Testes do ReadWriteLock."""

from __future__ import annotations

import threading

from app.infra.stores.rwlock import ReadWriteLock


class TestReadWriteLock:
    """Testes de exclusão mútua e compartilhamento."""

    def test_readers_share_the_lock(self) -> None:
        """Dois leitores seguram o lock ao mesmo tempo."""
        lock = ReadWriteLock()
        both_inside = threading.Barrier(2, timeout=2)
        results: list[bool] = []

        def reader() -> None:
            with lock.read_locked():
                both_inside.wait()
                results.append(True)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [True, True]

    def test_writer_waits_for_reader(self) -> None:
        """Escritor só entra depois que o leitor sai."""
        lock = ReadWriteLock()
        events: list[str] = []
        writer_started = threading.Event()

        lock.acquire_read()

        def writer() -> None:
            writer_started.set()
            with lock.write_locked():
                events.append("write")

        t = threading.Thread(target=writer)
        t.start()
        writer_started.wait(timeout=2)
        t.join(timeout=0.1)
        events.append("read_done")
        lock.release_read()
        t.join(timeout=2)

        assert events == ["read_done", "write"]

    def test_waiting_writer_blocks_new_readers(self) -> None:
        """Com escritor aguardando, novos leitores esperam a escrita."""
        lock = ReadWriteLock()
        events: list[str] = []
        lock.acquire_read()

        writer = threading.Thread(target=lambda: _locked_append(lock.write_locked, events, "write"))
        writer.start()
        # espera o escritor se registrar como aguardando
        while True:
            with lock._cond:
                if lock._writers_waiting:
                    break

        reader = threading.Thread(target=lambda: _locked_append(lock.read_locked, events, "read"))
        reader.start()
        reader.join(timeout=0.1)
        assert events == []

        lock.release_read()
        writer.join(timeout=2)
        reader.join(timeout=2)
        assert events == ["write", "read"]


def _locked_append(cm_factory, events: list[str], value: str) -> None:
    with cm_factory():
        events.append(value)
