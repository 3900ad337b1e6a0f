from civic_reports.models.counter import IssueCounter
from civic_reports.models.issue import Issue
from civic_reports.services.issue_ids import format_issue_id, next_issue_id, next_issue_number


def test_format_issue_id_pads_to_three_digits():
    assert format_issue_id(1) == "CIV001"
    assert format_issue_id(42) == "CIV042"
    assert format_issue_id(999) == "CIV999"


def test_format_issue_id_widens_past_three_digits():
    assert format_issue_id(1000) == "CIV1000"
    assert format_issue_id(123456) == "CIV123456"


def test_counter_is_seeded_from_existing_issue_count(test_db):
    db = test_db()
    db.add_all([Issue(id="CIV001", title="a"), Issue(id="CIV002", title="b")])
    db.commit()

    assert next_issue_id(db) == "CIV003"
    db.commit()
    assert db.get(IssueCounter, "issues").value == 3
    db.close()


def test_counter_increments_on_each_call(test_db):
    db = test_db()
    numbers = [next_issue_number(db) for _ in range(3)]
    db.commit()
    assert numbers == [1, 2, 3]
    db.close()


def test_rolled_back_allocation_is_reused(test_db):
    db = test_db()
    assert next_issue_number(db) == 1
    db.commit()

    assert next_issue_number(db) == 2
    db.rollback()

    assert next_issue_number(db) == 2
    db.close()
