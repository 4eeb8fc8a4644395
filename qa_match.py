"""Fuzzy "did you mean" matching for searches that find nothing.

Builds a TF-IDF matrix over the current question texts and ranks them by
cosine similarity with the search term.
"""
import logging
from typing import List

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import linear_kernel

from qa_models import Question
from qa_store import QuestionStore

logger = logging.getLogger(__name__)


class QuestionMatcher:
    def __init__(self, store: QuestionStore, min_score: float = 0.1):
        self.store = store
        self.min_score = min_score

    def suggest(self, term: str, limit: int = 3) -> List[Question]:
        term = (term or "").strip()
        questions = self.store.all()
        if not term or not questions or limit <= 0:
            return []

        # The store changes between calls, so the index is rebuilt each time.
        vectorizer = TfidfVectorizer(stop_words="english")
        try:
            matrix = vectorizer.fit_transform([q.text for q in questions])
        except ValueError:
            # empty vocabulary, e.g. questions made only of stop words
            logger.debug("No usable vocabulary across %d question(s)", len(questions))
            return []
        logger.debug("Built TF-IDF matrix for %d questions", len(questions))

        # tf-idf rows are l2-normalised, so the linear kernel is the cosine
        scores = linear_kernel(vectorizer.transform([term]), matrix).ravel()
        ranked = np.argsort(-scores, kind="stable")[:limit]
        suggestions = [questions[i] for i in ranked if scores[i] > 0 and scores[i] >= self.min_score]
        logger.debug("Suggestions for %r: %s", term, [q.id for q in suggestions])
        return suggestions
