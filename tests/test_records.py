"""Tests for deep copy and record merging."""

from collections import OrderedDict, defaultdict, namedtuple

from dmlib import Curried, assign, deep_copy, join_tables, map, process_record, process_table


class TestDeepCopy:
    """Tests for deep_copy."""

    def test_structurally_equal_but_distinct(self):
        """Test every nested container is a new object."""
        source = {"stats": {"hp": 10, "tags": ["a", "b"]}, "pair": (1, [2])}
        copy = deep_copy(source)

        assert copy == source
        assert copy is not source
        assert copy["stats"] is not source["stats"]
        assert copy["stats"]["tags"] is not source["stats"]["tags"]
        assert copy["pair"][1] is not source["pair"][1]

    def test_mutating_copy_leaves_source(self):
        """Test changes to the copy do not reach the source."""
        source = {"stats": {"hp": 10}}
        copy = deep_copy(source)
        copy["stats"]["hp"] = 0
        copy["new"] = True
        assert source == {"stats": {"hp": 10}}

    def test_scalars_unchanged(self):
        """Test non-containers are returned as is."""
        marker = object()
        assert deep_copy(5) == 5
        assert deep_copy("text") == "text"
        assert deep_copy(marker) is marker
        assert deep_copy(None) is None

    def test_self_reference_keeps_cycle(self):
        """Test a self-referencing dict copies into one."""
        source = {"name": "loop"}
        source["self"] = source
        copy = deep_copy(source)

        assert copy is not source
        assert copy["self"] is copy
        assert copy["name"] == "loop"

    def test_shared_child_stays_shared(self):
        """Test one source child gives one copied child."""
        shared = [1]
        copy = deep_copy({"a": shared, "b": shared})
        assert copy["a"] is copy["b"]
        assert copy["a"] is not shared

    def test_mutual_cycle(self):
        """Test two lists referring to each other."""
        a, b = [], []
        a.append(b)
        b.append(a)
        copy = deep_copy(a)
        assert copy[0][0] is copy

    def test_namedtuple_and_set(self):
        """Test namedtuples keep their type and sets their members."""
        Point = namedtuple("Point", "x y")
        copy = deep_copy({"p": Point(1, [2]), "s": {1, 2}})
        assert isinstance(copy["p"], Point)
        assert copy["p"] == Point(1, [2])
        assert copy["s"] == {1, 2}

    def test_defaultdict_keeps_factory(self):
        """Test a defaultdict copies into a defaultdict with the same factory."""
        source = defaultdict(list, {"a": [1]})
        copy = deep_copy(source)

        assert type(copy) is defaultdict
        assert copy.default_factory is list
        assert copy == {"a": [1]}
        assert copy["a"] is not source["a"]
        copy["missing"].append(2)
        assert "missing" not in source

    def test_ordered_dict_keeps_type(self):
        """Test an OrderedDict copies into an OrderedDict in the same order."""
        source = OrderedDict([("b", 1), ("a", {"x": 2})])
        copy = deep_copy(source)

        assert type(copy) is OrderedDict
        assert list(copy) == ["b", "a"]
        assert copy["a"] is not source["a"]


class TestAssign:
    """Tests for the allow-list merge."""

    def test_only_target_keys(self):
        """Test keys missing from target are ignored."""
        target = {"a": 1, "b": 2}
        assert assign(target, {"a": 5, "c": 9}) == {"a": 5, "b": 2}

    def test_mutates_and_returns_target(self):
        """Test target is changed in place and returned."""
        target = {"a": 1}
        assert assign(target, {"a": 2}) is target
        assert target == {"a": 2}

    def test_recurses_into_nested_records(self):
        """Test nested records merge in place."""
        target = {"stats": {"hp": 10, "mp": 5}, "name": "x"}
        inner = target["stats"]
        assign(target, {"stats": {"hp": 3, "extra": 1}})

        assert target == {"stats": {"hp": 3, "mp": 5}, "name": "x"}
        assert target["stats"] is inner

    def test_absent_source_values_skipped(self):
        """Test None is skipped and 0 is written."""
        target = {"a": 1, "b": 2}
        assign(target, {"a": None, "b": 0})
        assert target == {"a": 1, "b": 0}

    def test_sequences_by_position(self):
        """Test lists merge position by position."""
        target = [1, 2, 3]
        assign(target, [9])
        assert target == [9, 2, 3]

    def test_container_replaced_by_leaf(self):
        """Test a leaf in source overwrites a container in target."""
        target = {"a": {"b": 1}}
        assign(target, {"a": 7})
        assert target == {"a": 7}


class TestJoinTables:
    """Tests for the union merge."""

    def test_union_with_conflict_resolution(self):
        """Test shared keys go through the resolver and inputs stay intact."""
        t1 = {"a": 1, "b": 3}
        t2 = {"a": 3, "c": 4}
        joined = join_tables(t1, t2, lambda v1, v2, _: (v1 + v2) / 2)

        assert joined == {"a": 2, "b": 3, "c": 4}
        assert t1 == {"a": 1, "b": 3}

    def test_key_passed_to_resolver(self):
        """Test the resolver receives the conflicting key."""
        seen = []
        join_tables({"a": 1}, {"a": 2}, lambda v1, v2, key: seen.append(key))
        assert seen == ["a"]


class TestProcessRecord:
    """Tests for transform-then-merge-back."""

    def test_keeps_identity_and_merges(self):
        """Test the original record is updated and new keys are dropped."""
        actor = {"stats": {"hp": 10, "stamina": 4}, "name": "Lydia"}
        stats = actor["stats"]

        def heal(record):
            record["stats"]["hp"] += 5
            return record

        def add_field(record):
            record["buff"] = True
            return record

        result = process_record(actor, [heal, add_field])

        assert result is actor
        assert actor["stats"] is stats
        assert actor == {"stats": {"hp": 15, "stamina": 4}, "name": "Lydia"}

    def test_transforms_may_return_new_records(self):
        """Test a transform returning a new dict still merges back."""
        actor = {"a": 1, "b": 2}
        process_record(actor, [map(lambda v: v * 10)])
        assert actor == {"a": 10, "b": 20}

    def test_pipeable(self):
        """Test process_table curries into a pipeline stage."""
        stage = process_table([lambda r: {"hp": 1}])
        assert isinstance(stage, Curried)
        record = {"hp": 0, "mp": 0}
        assert stage(record) is record
        assert record == {"hp": 1, "mp": 0}
