from dataclasses import asdict, replace

from blerelay.config import AcknowledgeMessage, Message, PeerStatusUpdate


def test_peer_status_defaults_to_offline_and_unnamed():
    status = PeerStatusUpdate()
    assert status.ip == ""
    assert status.online is False


def test_peer_status_equality_follows_fields():
    assert PeerStatusUpdate("10.0.0.2", True) == PeerStatusUpdate(ip="10.0.0.2", online=True)
    assert PeerStatusUpdate("10.0.0.2", True) != PeerStatusUpdate("10.0.0.2", False)


def test_message_round_trips_through_dict():
    message = Message(ip="10.0.0.3", uuid="1800")
    assert Message(**asdict(message)) == message


def test_acknowledge_message_defaults_and_replace():
    ack = AcknowledgeMessage(ip="10.0.0.4", uuid="abcd")
    assert ack.not_acknowledged is False
    pending = replace(ack, not_acknowledged=True)
    assert pending.not_acknowledged is True
    assert (pending.ip, pending.uuid) == (ack.ip, ack.uuid)


def test_status_is_mutable_in_place():
    status = PeerStatusUpdate("10.0.0.5")
    status.online = True
    assert status == PeerStatusUpdate("10.0.0.5", True)