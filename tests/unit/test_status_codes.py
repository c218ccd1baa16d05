"""
Tests for Status Code Classification
"""

import pytest
from core.status_codes import StatusCodeClassifier, status_class
from config import STATUS_CODE_MESSAGES, UNKNOWN_ERROR_MESSAGE


class TestClassify:
    """Tests for the default status table"""

    def setup_method(self):
        self.classifier = StatusCodeClassifier()

    def test_exact_match(self):
        """404 returns its own entry, not the 4XX fallback"""
        assert self.classifier.classify("404") == STATUS_CODE_MESSAGES["404"]
        assert self.classifier.classify("404") != STATUS_CODE_MESSAGES["4XX"]

    def test_client_class_fallback(self):
        """Unlisted 4xx codes use the 4XX entry"""
        assert self.classifier.classify("499") == STATUS_CODE_MESSAGES["4XX"]
        assert self.classifier.classify("422") == STATUS_CODE_MESSAGES["4XX"]

    def test_server_class_fallback(self):
        """Unlisted 5xx codes use the 5XX entry"""
        assert self.classifier.classify("507") == STATUS_CODE_MESSAGES["5XX"]

    def test_unknown_leading_digit(self):
        """Codes outside 4xx/5xx are unknown"""
        assert self.classifier.classify("999") == UNKNOWN_ERROR_MESSAGE
        assert self.classifier.classify("302") == UNKNOWN_ERROR_MESSAGE

    def test_absent_code(self):
        """None and empty strings are unknown"""
        assert self.classifier.classify(None) == UNKNOWN_ERROR_MESSAGE
        assert self.classifier.classify("") == UNKNOWN_ERROR_MESSAGE

    def test_non_numeric_codes(self):
        """Provider codes like 'ECONNRESET' degrade to unknown, '4' prefixes still classify"""
        assert self.classifier.classify("ECONNRESET") == UNKNOWN_ERROR_MESSAGE
        assert self.classifier.classify("4xx_custom") == STATUS_CODE_MESSAGES["4XX"]

    @pytest.mark.parametrize("code", ["400", "401", "402", "403", "405", "429", "500", "502", "503", "504"])
    def test_listed_codes(self, code):
        """Every listed code maps to its own text"""
        assert self.classifier.classify(code) == STATUS_CODE_MESSAGES[code]


class TestCustomTable:
    """Tests for substituted tables"""

    def test_custom_table(self):
        """A replacement table is used without code changes"""
        classifier = StatusCodeClassifier({
            "418": "I'm a teapot",
            "4XX": "Client problem",
            "UNKNOWN": "No idea",
        })
        assert classifier.classify("418") == "I'm a teapot"
        assert classifier.classify("404") == "Client problem"
        assert classifier.classify("500") == "No idea"
        assert classifier.classify(None) == "No idea"

    def test_table_without_unknown(self):
        """Missing fallback entries use the built-in unknown text"""
        classifier = StatusCodeClassifier({"404": "gone"})
        assert classifier.classify("404") == "gone"
        assert classifier.classify("401") == UNKNOWN_ERROR_MESSAGE
        assert classifier.classify(None) == UNKNOWN_ERROR_MESSAGE

    def test_table_is_read_only(self):
        """The classifier keeps its own read-only copy"""
        source = {"404": "gone"}
        classifier = StatusCodeClassifier(source)
        source["404"] = "changed"
        assert classifier.classify("404") == "gone"
        with pytest.raises(TypeError):
            classifier.table["404"] = "mutated"

    def test_default_table_is_read_only(self):
        """The process-wide table cannot be mutated"""
        with pytest.raises(TypeError):
            STATUS_CODE_MESSAGES["404"] = "mutated"


class TestStatusClass:
    """Tests for leading-digit grouping"""

    def test_status_class(self):
        assert status_class("404") == "4XX"
        assert status_class("503") == "5XX"
        assert status_class("200") is None
        assert status_class(None) is None
