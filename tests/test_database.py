"""Question store behaviour against a real SQLite file."""

from sqlalchemy import inspect, text

from interview_questions.core.exceptions import (
    DuplicateQuestionError,
    EmptyQuestionError,
    QuestionNotFoundError,
    StorageUnavailableError,
)
from interview_questions.core.question import Question, QuestionCategory
from interview_questions.storage.database import (
    QuestionStore,
    STATUS_ADDED,
    STATUS_ADD_ERROR,
    STATUS_DUPLICATE,
    STATUS_EMPTY,
    STATUS_NOT_FOUND,
    STATUS_REMOVED,
    STATUS_REMOVE_ERROR,
)


def _insert_raw(store, question_text, question_type):
    with store.engine.begin() as conn:
        conn.execute(
            text("INSERT INTO questions (question_text, question_type) VALUES (:t, :c)"),
            {"t": question_text, "c": question_type},
        )


def test_initialize_creates_table(store):
    columns = {c["name"]: c for c in inspect(store.engine).get_columns("questions")}
    assert set(columns) == {"id", "question_text", "question_type"}
    assert not columns["question_text"]["nullable"]
    assert not columns["question_type"]["nullable"]


def test_initialize_is_idempotent(store):
    store.add("Explain TCP handshake", QuestionCategory.TECHNICAL)
    assert store.initialize()
    assert store.initialize()
    assert len(store.list_all()) == 1


def test_initialize_creates_parent_directory(tmp_path):
    s = QuestionStore(tmp_path / "nested" / "dir" / "questions.db")
    try:
        assert s.initialize()
        assert s.db_path.exists()
    finally:
        s.close()


def test_add_then_list(store):
    result = store.add("Explain TCP handshake", QuestionCategory.TECHNICAL)

    assert result.ok
    assert result.status == STATUS_ADDED
    assert result.error is None
    expected = Question("Explain TCP handshake", QuestionCategory.TECHNICAL)
    assert result.questions == [expected]
    assert store.list_all() == [expected]


def test_add_accepts_label_string(store):
    store.add("Tell me about a failure", "Behavioral")
    assert store.list_all() == [Question("Tell me about a failure", QuestionCategory.BEHAVIORAL)]


def test_add_unknown_label_files_as_general(store):
    store.add("Where do you see yourself?", "Career")
    assert store.list_all()[0].category is QuestionCategory.GENERAL


def test_add_duplicate_keeps_single_record(store):
    store.add("Why Python?", QuestionCategory.GENERAL)
    result = store.add("Why Python?", QuestionCategory.TECHNICAL)

    assert not result.ok
    assert result.status == STATUS_DUPLICATE
    assert isinstance(result.error, DuplicateQuestionError)
    assert store.list_all() == [Question("Why Python?", QuestionCategory.GENERAL)]


def test_duplicate_check_ignores_surrounding_whitespace(store):
    store.add("Why Python?", QuestionCategory.GENERAL)
    result = store.add("  Why Python?  ", QuestionCategory.GENERAL)

    assert result.status == STATUS_DUPLICATE
    assert len(store.list_all()) == 1


def test_duplicate_check_is_case_sensitive(store):
    store.add("Why Python?", QuestionCategory.GENERAL)
    result = store.add("why python?", QuestionCategory.GENERAL)

    assert result.ok
    assert [q.text for q in store.list_all()] == ["Why Python?", "why python?"]


def test_add_empty_is_rejected(store):
    store.add("Existing", QuestionCategory.GENERAL)
    before = store.list_all()

    for blank in ["", "   ", "\t\n", None]:
        result = store.add(blank, QuestionCategory.TECHNICAL)
        assert not result.ok
        assert result.status == STATUS_EMPTY
        assert isinstance(result.error, EmptyQuestionError)

    assert store.list_all() == before


def test_add_strips_text(store):
    store.add("  Explain GIL  ", QuestionCategory.TECHNICAL)
    assert store.list_all()[0].text == "Explain GIL"


def test_list_all_is_insertion_order(store):
    texts = ["Q3", "Q1", "Q2"]
    for t in texts:
        store.add(t, QuestionCategory.GENERAL)
    assert [q.text for q in store.list_all()] == texts


def test_remove_existing(store):
    store.add("Explain TCP handshake", QuestionCategory.TECHNICAL)
    result = store.remove("Explain TCP handshake", QuestionCategory.TECHNICAL)

    assert result.ok
    assert result.status == STATUS_REMOVED
    assert result.questions == []
    assert store.list_all() == []


def test_remove_missing_reports_not_found(store):
    store.add("Keep me", QuestionCategory.GENERAL)
    before = store.list_all()

    result = store.remove("Not stored", QuestionCategory.GENERAL)

    assert not result.ok
    assert result.status == STATUS_NOT_FOUND
    assert isinstance(result.error, QuestionNotFoundError)
    assert store.list_all() == before


def test_remove_requires_matching_category(store):
    store.add("Explain TCP handshake", QuestionCategory.TECHNICAL)
    result = store.remove("Explain TCP handshake", QuestionCategory.BEHAVIORAL)

    assert result.status == STATUS_NOT_FOUND
    assert len(store.list_all()) == 1


def test_add_remove_round_trip(store):
    store.add("Existing", QuestionCategory.BEHAVIORAL)
    before = store.list_all()

    store.add("Temporary", QuestionCategory.TECHNICAL)
    assert Question("Temporary", QuestionCategory.TECHNICAL) in store.list_all()
    store.remove("Temporary", QuestionCategory.TECHNICAL)

    assert store.list_all() == before


def test_removed_text_can_be_added_again(store):
    store.add("Explain REST", QuestionCategory.TECHNICAL)
    store.remove("Explain REST", QuestionCategory.TECHNICAL)

    result = store.add("Explain REST", QuestionCategory.GENERAL)
    assert result.ok
    assert store.list_all() == [Question("Explain REST", QuestionCategory.GENERAL)]


def test_known_texts_follow_table(store):
    store.add("A", QuestionCategory.GENERAL)
    store.add("B", QuestionCategory.TECHNICAL)
    assert store.known_texts() == {"A", "B"}

    # Changes made outside the store are visible immediately
    _insert_raw(store, "C", "Behavioral")
    assert store.known_texts() == {"A", "B", "C"}
    assert store.add("C", QuestionCategory.BEHAVIORAL).status == STATUS_DUPLICATE


def test_unknown_stored_category_reads_as_general(store):
    _insert_raw(store, "Legacy question", "Situational")

    question = store.list_all()[0]
    assert question.category is QuestionCategory.GENERAL
    assert question.display() == "General: Legacy question"


def test_list_by_category(store):
    store.add("G1", QuestionCategory.GENERAL)
    store.add("T1", QuestionCategory.TECHNICAL)
    store.add("T2", "Technical")
    _insert_raw(store, "Legacy", "Situational")

    assert [q.text for q in store.list_by_category(QuestionCategory.TECHNICAL)] == ["T1", "T2"]
    assert [q.text for q in store.list_by_category("General")] == ["G1", "Legacy"]
    assert store.list_by_category(QuestionCategory.BEHAVIORAL) == []


def test_get_stats(store):
    assert store.get_stats() == {
        "total_questions": 0,
        "by_category": {"General": 0, "Technical": 0, "Behavioral": 0},
    }

    store.add("T1", QuestionCategory.TECHNICAL)
    store.add("B1", QuestionCategory.BEHAVIORAL)
    _insert_raw(store, "Legacy", "Situational")

    assert store.get_stats() == {
        "total_questions": 3,
        "by_category": {"General": 1, "Technical": 1, "Behavioral": 1},
    }


def test_persists_across_instances(db_path, store):
    store.add("Explain TCP handshake", QuestionCategory.TECHNICAL)

    reopened = QuestionStore(db_path)
    try:
        assert reopened.initialize()
        assert reopened.list_all() == [Question("Explain TCP handshake", QuestionCategory.TECHNICAL)]
    finally:
        reopened.close()


def test_display_items(store):
    store.add("Explain GIL", QuestionCategory.TECHNICAL)
    result = store.add("Greatest strength?", QuestionCategory.GENERAL)
    assert result.display_items == ["Technical: Explain GIL", "General: Greatest strength?"]


def test_storage_errors_do_not_raise(db_path):
    # Table never created, every statement fails at the engine
    s = QuestionStore(db_path)
    try:
        added = s.add("Explain TCP handshake", QuestionCategory.TECHNICAL)
        assert not added.ok
        assert added.status == STATUS_ADD_ERROR
        assert isinstance(added.error, StorageUnavailableError)
        assert added.questions == []

        removed = s.remove("Explain TCP handshake", QuestionCategory.TECHNICAL)
        assert not removed.ok
        assert removed.status == STATUS_REMOVE_ERROR
        assert isinstance(removed.error, StorageUnavailableError)

        assert s.list_all() == []
        assert s.known_texts() == set()
        assert s.get_stats() == {}
    finally:
        s.close()


def test_unusable_parent_directory_does_not_raise(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    s = QuestionStore(blocker / "sub" / "questions.db")
    try:
        assert not s.initialize()

        result = s.add("Explain TCP handshake", QuestionCategory.TECHNICAL)
        assert not result.ok
        assert result.status == STATUS_ADD_ERROR
        assert s.list_all() == []
    finally:
        s.close()


def test_unknown_stored_category_removes_as_general(store):
    _insert_raw(store, "Legacy question", "Situational")

    assert store.remove("Legacy question", QuestionCategory.TECHNICAL).status == STATUS_NOT_FOUND
    assert len(store.list_all()) == 1

    result = store.remove("Legacy question", QuestionCategory.GENERAL)
    assert result.ok
    assert result.status == STATUS_REMOVED
    assert store.list_all() == []


def test_general_remove_leaves_other_categories(store):
    store.add("Shared", QuestionCategory.TECHNICAL)

    assert store.remove("Shared", QuestionCategory.GENERAL).status == STATUS_NOT_FOUND
    assert store.list_all() == [Question("Shared", QuestionCategory.TECHNICAL)]
