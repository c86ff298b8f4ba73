from openapi_check.checks.tags import check_tags, declared_tags, used_tags
from openapi_check.parser.base import Findings


def _warnings(document) -> list[str]:
    findings = Findings()
    check_tags(document, findings)
    assert findings.errors == []
    return [d.message for d in findings.warnings]


class TestTagSets:
    def test_declared_tags(self):
        document = {"tags": [{"name": "A"}, {"description": "nameless"}, {"name": "B"}]}
        assert list(declared_tags(document)) == ["A", "B"]

    def test_used_tags_only_from_operations(self):
        document = {"paths": {"/x": {
            "parameters": [{"tags": ["ignored"]}],
            "get": {"tags": ["A", "B"]},
            "post": {"tags": ["B", "C"]},
        }}}
        assert list(used_tags(document)) == ["A", "B", "C"]


class TestCheckTags:
    def test_declared_but_unused(self):
        assert _warnings({"tags": [{"name": "A"}], "paths": {}}) == [
            'Tag "A" is defined but never used'
        ]

    def test_used_but_undeclared(self):
        document = {"paths": {"/x": {"get": {"tags": ["B"]}}}}
        assert _warnings(document) == ['Tag "B" is used but not defined in tags section']

    def test_consistent_tags(self):
        document = {"tags": [{"name": "A"}], "paths": {"/x": {"get": {"tags": ["A"]}}}}
        assert _warnings(document) == []

    def test_both_directions(self):
        document = {"tags": [{"name": "A"}], "paths": {"/x": {"get": {"tags": ["B"]}}}}
        assert _warnings(document) == [
            'Tag "A" is defined but never used',
            'Tag "B" is used but not defined in tags section',
        ]

    def test_no_tags_anywhere(self):
        assert _warnings({}) == []
