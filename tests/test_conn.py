import socket

from blerelay.conn import dial_broadcast_udp


def test_socket_is_udp_with_broadcast_and_reuse():
    with dial_broadcast_udp(0) as sock:
        assert sock.type == socket.SOCK_DGRAM
        assert sock.getsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST) != 0
        assert sock.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0


def test_socket_is_bound_to_requested_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    with dial_broadcast_udp(port) as sock:
        assert sock.getsockname()[1] == port


def test_datagram_round_trip():
    with dial_broadcast_udp(0) as receiver, socket.socket(
        socket.AF_INET, socket.SOCK_DGRAM
    ) as sender:
        receiver.settimeout(2.0)
        port = receiver.getsockname()[1]
        sender.sendto(b"hello", ("127.0.0.1", port))
        data, _ = receiver.recvfrom(1024)
        assert data == b"hello"


def test_two_sockets_may_share_a_port():
    with dial_broadcast_udp(0) as first:
        port = first.getsockname()[1]
        with dial_broadcast_udp(port) as second:
            assert second.getsockname()[1] == first.getsockname()[1]