"""Tests for document ordering."""

import functools

from yamlfmt.codec import compose_all
from yamlfmt.nodes import DocumentNode
from yamlfmt.sorting import (
    SORT_FIELDS,
    compare_documents,
    document_key,
    field_value,
    sort_documents,
)


def marker(doc):
    return field_value(doc, ['id'])


def ordered(text):
    return [marker(doc) for doc in sort_documents(compose_all(text))]


class TestFieldValue:
    """Tests for field_value()."""

    def test_scalar(self):
        """Scalars yield their raw value."""
        doc = compose_all("kind: Service\n")[0]
        assert field_value(doc, ['kind']) == 'Service'

    def test_missing(self):
        """Unresolvable paths yield None."""
        doc = compose_all("kind: Service\n")[0]
        assert field_value(doc, ['metadata', 'name']) is None

    def test_non_scalar_is_missing(self):
        """A mapping where a scalar is expected counts as missing."""
        doc = compose_all("metadata:\n  name:\n    first: web\n")[0]
        assert field_value(doc, ['metadata', 'name']) is None

    def test_empty_value(self):
        """An empty scalar is present, with an empty value."""
        doc = compose_all("kind:\n")[0]
        assert field_value(doc, ['kind']) == ''

    def test_field_order(self):
        """Tiers are kind, namespace, name."""
        assert [name for name, _ in SORT_FIELDS] == ['kind', 'namespace', 'name']


class TestSortDocuments:
    """Tests for sort_documents()."""

    def test_by_kind(self):
        """Documents are ordered by kind first."""
        text = ("id: 1\nkind: Service\n---\n"
                "id: 2\nkind: Deployment\n---\n"
                "id: 3\nkind: ConfigMap\n")
        assert ordered(text) == ['3', '2', '1']

    def test_kind_before_missing_kind(self):
        """A document with a kind sorts before one without, whatever else."""
        text = ("id: 1\nmetadata:\n  namespace: a\n  name: a\n---\n"
                "id: 2\nkind: Zeta\n")
        assert ordered(text) == ['2', '1']

    def test_namespace_breaks_kind_ties(self):
        """Equal kinds are ordered by namespace."""
        text = ("id: 1\nkind: Deployment\nmetadata:\n  namespace: b\n---\n"
                "id: 2\nkind: Deployment\nmetadata:\n  namespace: a\n")
        assert ordered(text) == ['2', '1']

    def test_missing_namespace_sorts_last(self):
        """Within a kind, documents without a namespace come last."""
        text = ("id: 1\nkind: Service\nmetadata:\n  name: a\n---\n"
                "id: 2\nkind: Service\nmetadata:\n  namespace: z\n  name: b\n")
        assert ordered(text) == ['2', '1']

    def test_name_breaks_namespace_ties(self):
        """Equal kinds and namespaces are ordered by name."""
        text = ("id: 1\nkind: Service\nmetadata:\n  namespace: a\n  name: web\n---\n"
                "id: 2\nkind: Service\nmetadata:\n  namespace: a\n  name: api\n---\n"
                "id: 3\nkind: Service\nmetadata:\n  namespace: a\n")
        assert ordered(text) == ['2', '1', '3']

    def test_lower_tiers_ignored_once_decided(self):
        """A kind difference wins over any namespace or name."""
        text = ("id: 1\nkind: B\nmetadata:\n  namespace: a\n  name: a\n---\n"
                "id: 2\nkind: A\nmetadata:\n  namespace: z\n  name: z\n")
        assert ordered(text) == ['2', '1']

    def test_codepoint_order(self):
        """Values compare by code point, so upper case sorts first."""
        text = "id: 1\nkind: alpha\n---\nid: 2\nkind: Zeta\n"
        assert ordered(text) == ['2', '1']

    def test_stable_without_kind(self):
        """Documents without any sort field keep their input order."""
        text = "id: 1\n---\nid: 2\n---\nid: 3\n"
        assert ordered(text) == ['1', '2', '3']

    def test_stable_for_equal_fields(self):
        """Documents equal on every tier keep their input order."""
        text = ("id: 1\nkind: Service\nmetadata: {name: a}\n---\n"
                "id: 2\nkind: Service\nmetadata: {name: a}\n---\n"
                "id: 0\nkind: Pod\n")
        assert ordered(text) == ['0', '1', '2']

    def test_non_mapping_documents(self):
        """Scalar and sequence documents have no fields and sort last."""
        docs = compose_all("- 1\n---\nplain\n---\nkind: Pod\n")
        result = sort_documents(docs)
        assert result[0] is docs[2]
        assert result[1:] == docs[:2]

    def test_malformed_document_sorts_last(self):
        """Resolution errors only mean the field is missing."""
        docs = [DocumentNode()] + compose_all("kind: Pod\n")
        result = sort_documents(docs)
        assert result == [docs[1], docs[0]]

    def test_returns_new_list(self):
        """The input list is left untouched."""
        docs = compose_all("kind: B\n---\nkind: A\n")
        original = list(docs)
        result = sort_documents(docs)
        assert docs == original
        assert result == [docs[1], docs[0]]

    def test_empty(self):
        assert sort_documents([]) == []


class TestCompareDocuments:
    """compare_documents() agrees with the sort key."""

    TEXT = ("id: 1\nkind: Service\nmetadata:\n  namespace: b\n  name: x\n---\n"
            "id: 2\n---\n"
            "id: 3\nkind: Service\nmetadata:\n  namespace: a\n---\n"
            "id: 4\nkind: Deployment\nmetadata:\n  name: web\n---\n"
            "id: 5\nkind: Service\nmetadata:\n  namespace: a\n  name: api\n---\n"
            "id: 6\nmetadata:\n  name: lonely\n")

    def test_pairwise(self):
        """Basic three-way results."""
        a, b = compose_all("kind: A\n---\nkind: B\n")
        assert compare_documents(a, b) == -1
        assert compare_documents(b, a) == 1
        assert compare_documents(a, a) == 0

    def test_missing_vs_present(self):
        """A missing field ranks after a present one."""
        present, missing = compose_all("kind: A\n---\nfoo: bar\n")
        assert compare_documents(present, missing) == -1
        assert compare_documents(missing, present) == 1

    def test_matches_sort_key(self):
        """Sorting with the comparator gives the same order as the key."""
        docs = compose_all(self.TEXT)
        by_cmp = sorted(docs, key=functools.cmp_to_key(compare_documents))
        assert by_cmp == sort_documents(docs)
        assert [marker(doc) for doc in by_cmp] == ['4', '5', '3', '1', '6', '2']

    def test_document_key_shape(self):
        """Keys hold one (missing, value) pair per tier."""
        doc = compose_all("kind: Pod\nmetadata:\n  name: web\n")[0]
        assert document_key(doc) == ((0, 'Pod'), (1, ''), (0, 'web'))
