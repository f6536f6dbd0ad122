from lyric_assistant.models import Analysis
from lyric_assistant.recall import SEPARATOR
from lyric_assistant.rhymes import RhymeMode
from lyric_assistant.session import KEY_PROJECT, KEY_QUEUE, LyricSession, analyze


def test_analyze_scenario():
    analysis = analyze("Hello world\n\nShe walks alone")
    assert analysis == Analysis(
        word_count=5,
        syllable_count=4,
        target_word="alone",
        line="She walks alone",
    )


def test_analyze_empty_text():
    analysis = analyze("")
    assert (analysis.word_count, analysis.syllable_count, analysis.target_word) == (0, 0, "")


def test_session_restores_from_store():
    store = {KEY_PROJECT: "Night Drive", KEY_QUEUE: f"one{SEPARATOR}two"}
    session = LyricSession(store)
    assert session.project_name == "Night Drive"
    assert session.queue.entries() == ["one", "two"]


def test_save_active_pushes_to_top_and_persists():
    store = {}
    session = LyricSession(store)
    assert session.save_active("  first idea ") == ""
    session.save_active("second idea")
    session.save_active("   ")
    assert store[KEY_QUEUE] == f"second idea{SEPARATOR}first idea"


def test_recall_next_rotates_active_line_to_bottom():
    store = {}
    session = LyricSession(store)
    session.save_active("B")
    session.save_active("A")
    assert session.recall_next("current") == "A"
    assert session.queue.entries() == ["B", "current"]
    assert store[KEY_QUEUE] == f"B{SEPARATOR}current"


def test_recall_next_on_empty_queue():
    store = {}
    session = LyricSession(store)
    assert session.recall_next("") is None
    assert store[KEY_QUEUE] == ""
    # a lone active line goes to the bottom and comes straight back
    assert session.recall_next("only line") == "only line"


def test_apply_active_appends_on_new_line():
    assert LyricSession.apply_active("", "  hello ") == "hello"
    assert LyricSession.apply_active("verse one", "verse two") == "verse one\nverse two"
    assert LyricSession.apply_active("verse one\n", "verse two") == "verse one\nverse two"
    assert LyricSession.apply_active("verse one", "   ") == "verse one"


def test_project_name_persists_on_assignment():
    store = {}
    session = LyricSession(store)
    session.project_name = "Demo"
    assert store[KEY_PROJECT] == "Demo"
    session.persist()
    assert store[KEY_QUEUE] == ""


def test_update_returns_stats_and_suggestions(engine):
    session = LyricSession({}, engine=engine)
    analysis, suggestions = session.update("I walked in through the door")
    assert analysis.target_word == "door"
    assert suggestions == ["more", "floor"]

    analysis, suggestions = session.update("   \n")
    assert analysis.word_count == 0
    assert suggestions == []

    _, phrases = session.update("", RhymeMode.PHRASE, 2)
    assert len(phrases) == 2
