import queue
import socket
import threading
import time

from blerelay.peers import TIMEOUT, PeerTracker, PeerUpdate, receiver, transmitter


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_first_sighting_is_reported_as_new():
    tracker = PeerTracker()
    assert tracker.observe("10.0.0.2", 0.0) == PeerUpdate(
        peers=["10.0.0.2"], new="10.0.0.2", lost=[]
    )


def test_repeat_sighting_reports_nothing():
    tracker = PeerTracker()
    tracker.observe("10.0.0.2", 0.0)
    assert tracker.observe("10.0.0.2", 0.5) is None
    assert tracker.peers == ["10.0.0.2"]


def test_silence_reports_nothing():
    tracker = PeerTracker()
    assert tracker.observe("", 0.0) is None
    assert tracker.peers == []


def test_peer_exactly_at_timeout_is_kept():
    tracker = PeerTracker()
    tracker.observe("10.0.0.2", 0.0)
    assert tracker.observe("", TIMEOUT) is None
    assert tracker.peers == ["10.0.0.2"]


def test_peer_past_timeout_is_lost():
    tracker = PeerTracker()
    tracker.observe("10.0.0.2", 0.0)
    update = tracker.observe("", TIMEOUT + 0.5)
    assert update == PeerUpdate(peers=[], new="", lost=["10.0.0.2"])
    assert tracker.peers == []


def test_peers_and_lost_are_sorted():
    tracker = PeerTracker(timeout=1.0)
    tracker.observe("c", 0.0)
    tracker.observe("a", 0.1)
    tracker.observe("b", 5.0)
    tracker.observe("d", 5.5)
    update = tracker.observe("e", 5.6)
    assert update.peers == sorted(update.peers)
    assert tracker.peers == ["b", "d", "e"]


def test_lost_list_sorted_when_several_time_out():
    tracker = PeerTracker(timeout=1.0)
    tracker.observe("z", 0.0)
    tracker.observe("m", 0.0)
    update = tracker.observe("n", 3.0)
    assert update.lost == ["m", "z"]
    assert update.new == "n"


def test_receiver_reports_new_peer():
    port = _free_port()
    updates = queue.Queue()
    stop = threading.Event()
    worker = threading.Thread(target=receiver, args=(port, updates, stop))
    worker.start()
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
            update = None
            for _ in range(50):
                sender.sendto(b"node-a", ("127.0.0.1", port))
                try:
                    update = updates.get(timeout=0.1)
                    break
                except queue.Empty:
                    continue
    finally:
        stop.set()
        worker.join(timeout=2)
    assert update == PeerUpdate(peers=["node-a"], new="node-a", lost=[])


def test_transmitter_consumes_enable_and_stops():
    enable = queue.Queue()
    enable.put(False)
    stop = threading.Event()
    timer = threading.Timer(0.2, stop.set)
    timer.start()
    started = time.monotonic()
    try:
        transmitter(_free_port(), "node-a", enable, stop)
    finally:
        timer.cancel()
        stop.set()
    elapsed = time.monotonic() - started
    assert enable.empty()
    assert elapsed < 2.0