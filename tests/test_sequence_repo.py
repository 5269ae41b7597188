from party_membership.repositories.sequence_repo import SequenceRepository


def test_counter_is_seeded_at_zero(session_factory):
    db = session_factory()
    try:
        assert SequenceRepository.current(db, "party_member_counter") == 0
    finally:
        db.close()


def test_next_value_increments_and_persists(session_factory):
    db = session_factory()
    try:
        assert SequenceRepository.next_value(db, "party_member_counter") == 1
        assert SequenceRepository.next_value(db, "party_member_counter") == 2
        db.commit()
    finally:
        db.close()

    db = session_factory()
    try:
        assert SequenceRepository.current(db, "party_member_counter") == 2
    finally:
        db.close()


def test_rolled_back_increment_is_discarded(session_factory):
    db = session_factory()
    try:
        SequenceRepository.next_value(db, "party_member_counter")
        db.rollback()
        assert SequenceRepository.current(db, "party_member_counter") == 0
    finally:
        db.close()


def test_next_value_creates_missing_counter(session_factory):
    db = session_factory()
    try:
        assert SequenceRepository.next_value(db, "other_counter") == 1
        db.commit()
    finally:
        db.close()


def test_ensure_is_idempotent(session_factory):
    db = session_factory()
    try:
        SequenceRepository.next_value(db, "party_member_counter")
        SequenceRepository.ensure(db, "party_member_counter")
        db.commit()
        assert SequenceRepository.current(db, "party_member_counter") == 1
    finally:
        db.close()
