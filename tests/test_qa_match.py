from qa_match import QuestionMatcher


def test_suggests_close_questions(questions):
    questions.add("What is a linked list?")
    rec = questions.add("How does recursion work?")
    matcher = QuestionMatcher(questions)

    assert questions.search("recursion explained") == []
    suggestions = matcher.suggest("recursion explained")
    assert [q.id for q in suggestions] == [rec]


def test_best_match_comes_first(questions):
    questions.add("Why is my list slow?")
    best = questions.add("How is a linked list different from an array list?")
    suggestions = QuestionMatcher(questions).suggest("linked list")
    assert suggestions[0].id == best


def test_limit_is_respected(questions):
    for n in range(5):
        questions.add(f"Python list question {n}")
    assert len(QuestionMatcher(questions).suggest("python lists", limit=2)) <= 2


def test_no_suggestions_without_overlap(questions):
    questions.add("What is a linked list?")
    assert QuestionMatcher(questions).suggest("quantum chromodynamics") == []


def test_empty_inputs(questions):
    matcher = QuestionMatcher(questions)
    assert matcher.suggest("linked list") == []
    questions.add("What is a linked list?")
    assert matcher.suggest("") == []
    assert matcher.suggest("linked list", limit=0) == []


def test_stop_word_only_questions(questions):
    questions.add("what is this and that")
    assert QuestionMatcher(questions).suggest("anything here") == []
