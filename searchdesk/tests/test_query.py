import os
import sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from searchdesk.constants import MSG_ENTER_CRITERION, MSG_ENTER_KEYWORD, MSG_INVALID_SIZE
from searchdesk.core.errors import ValidationError
from searchdesk.core.query import AdvancedQuery, BasicQuery


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_basic_query_rejects_blank(text):
    with pytest.raises(ValidationError) as exc:
        BasicQuery(text)
    assert exc.value.notice == MSG_ENTER_KEYWORD


def test_basic_query_keeps_text():
    assert BasicQuery(" foo ").text == " foo "


def test_advanced_query_requires_a_criterion():
    with pytest.raises(ValidationError) as exc:
        AdvancedQuery.from_form({"file_type": "", "min_size": "", "max_size": None, "query": "  "})
    assert exc.value.notice == MSG_ENTER_CRITERION


def test_all_types_counts_as_unset():
    with pytest.raises(ValidationError):
        AdvancedQuery.from_form({"file_type": "all"})


def test_single_size_bound_is_enough():
    q = AdvancedQuery.from_form({"min_size": 1024})
    assert q.filters() == {"file_type": None, "min_size": 1024, "max_size": None}


def test_zero_bound_is_a_criterion():
    q = AdvancedQuery.from_form({"max_size": 0})
    assert q.filters()["max_size"] == 0


def test_form_text_and_type():
    q = AdvancedQuery.from_form({"file_type": " pdf ", "query": "invoice"})
    assert q.text == "invoice"
    assert q.filters() == {"file_type": "pdf", "min_size": None, "max_size": None}


@pytest.mark.parametrize("bad", ["abc", "-1", -5])
def test_invalid_size(bad):
    with pytest.raises(ValidationError) as exc:
        AdvancedQuery.from_form({"min_size": bad, "query": "x"})
    assert exc.value.notice == MSG_INVALID_SIZE


@pytest.mark.parametrize("huge", ["inf", "1e400", float("inf")])
def test_non_finite_size_is_invalid(huge):
    with pytest.raises(ValidationError) as exc:
        AdvancedQuery.from_form({"min_size": huge})
    assert exc.value.notice == MSG_INVALID_SIZE
