from __future__ import annotations

import copy
import unittest

from jsonvalue import EMPTY_ARRAY, EMPTY_OBJECT, JSONType, JSONValue


class ConstructionTests(unittest.TestCase):
    def test_default_is_null(self) -> None:
        value = JSONValue()
        self.assertTrue(value.is_null())
        self.assertEqual(value.type, JSONType.NULL)

    def test_scalar_constructors(self) -> None:
        self.assertEqual(JSONValue(True).type, JSONType.BOOL)
        self.assertEqual(JSONValue(3).type, JSONType.NUMBER)
        self.assertEqual(JSONValue(3).get_number(), 3.0)
        self.assertIsInstance(JSONValue(3).get_number(), float)
        self.assertEqual(JSONValue(2.5).get_number(), 2.5)
        self.assertEqual(JSONValue("hi").get_string(), "hi")

    def test_python_containers_are_converted(self) -> None:
        value = JSONValue({"a": [1, "two", None], "b": {"c": False}})
        self.assertTrue(value.is_object())
        self.assertTrue(value["a"].is_array())
        self.assertEqual(value["a"].size(), 3)
        self.assertTrue(value["a"].at(2).is_null())
        self.assertFalse(value["b"]["c"].get_bool())
        self.assertTrue(value["b"]["c"].is_bool())

    def test_unsupported_types_raise(self) -> None:
        with self.assertRaises(TypeError):
            JSONValue(object())
        with self.assertRaises(TypeError):
            JSONValue({1: "x"})

    def test_integers_beyond_float_range_raise(self) -> None:
        with self.assertRaises(ValueError):
            JSONValue(10**400)
        with self.assertRaises(ValueError):
            JSONValue({"a": [-(10**400)]})

    def test_set_replaces_type_and_payload(self) -> None:
        value = JSONValue([1, 2, 3])
        value.set("text")
        self.assertTrue(value.is_string())
        self.assertEqual(value.size(), 0)
        self.assertEqual(value.get_array(), EMPTY_ARRAY)
        value.set_empty_object()
        self.assertTrue(value.is_object())
        self.assertTrue(value.is_empty())
        value.set_null()
        self.assertTrue(value.is_null())


class TypeMismatchDefaultTests(unittest.TestCase):
    def test_number_reads_as_other_types(self) -> None:
        n = JSONValue(7)
        self.assertEqual(n.get_string(), "")
        self.assertFalse(n.get_bool())
        self.assertEqual(len(n.get_array()), 0)
        self.assertEqual(len(n.get_object()), 0)
        self.assertEqual(n.size(), 0)
        self.assertFalse(n.is_empty())

    def test_string_reads_number_as_zero(self) -> None:
        self.assertEqual(JSONValue("12").get_number(), 0.0)

    def test_sentinels_are_shared_and_read_only(self) -> None:
        self.assertIs(JSONValue("x").get_array(), EMPTY_ARRAY)
        self.assertIs(JSONValue("x").get_object(), EMPTY_OBJECT)
        with self.assertRaises(TypeError):
            EMPTY_OBJECT["a"] = JSONValue()  # type: ignore[index]

    def test_const_access_returns_empty_sentinel(self) -> None:
        value = JSONValue({"a": 1})
        self.assertIs(value.get("missing"), JSONValue.EMPTY)
        self.assertIs(value.at(0), JSONValue.EMPTY)
        self.assertIs(JSONValue([1]).at(5), JSONValue.EMPTY)
        self.assertTrue(value.is_object())
        self.assertEqual(value.size(), 1)

    def test_empty_sentinel_cannot_be_mutated(self) -> None:
        with self.assertRaises(TypeError):
            JSONValue.EMPTY["a"] = 1
        with self.assertRaises(TypeError):
            JSONValue.EMPTY.push(1)
        with self.assertRaises(TypeError):
            JSONValue.EMPTY.set(True)
        self.assertTrue(JSONValue.EMPTY.is_null())

    def test_is_empty_on_containers(self) -> None:
        self.assertTrue(JSONValue([]).is_empty())
        self.assertTrue(JSONValue({}).is_empty())
        self.assertFalse(JSONValue([0]).is_empty())
        self.assertFalse(JSONValue().is_empty())


class CoerciveIndexingTests(unittest.TestCase):
    def test_nested_assignment_from_null(self) -> None:
        v = JSONValue()
        v["a"][0] = 5
        self.assertTrue(v.is_object())
        self.assertTrue(v["a"].is_array())
        self.assertEqual(v["a"][0].get_number(), 5)

    def test_push_builds_nested_structure(self) -> None:
        v = JSONValue()
        v["a"]["b"].push(1)
        self.assertEqual(v, JSONValue({"a": {"b": [1]}}))

    def test_string_key_resets_array(self) -> None:
        v = JSONValue([1, 2])
        v["k"] = "x"
        self.assertTrue(v.is_object())
        self.assertEqual(v.size(), 1)

    def test_index_resets_object_and_grows(self) -> None:
        v = JSONValue({"a": 1})
        v[2] = True
        self.assertTrue(v.is_array())
        self.assertEqual(v.size(), 3)
        self.assertTrue(v.at(0).is_null())
        self.assertTrue(v.at(2).get_bool())

    def test_reading_missing_key_creates_null_child(self) -> None:
        v = JSONValue({})
        child = v["new"]
        self.assertTrue(child.is_null())
        self.assertTrue(v.contains("new"))
        self.assertIn("new", v)

    def test_invalid_indices(self) -> None:
        v = JSONValue([])
        with self.assertRaises(IndexError):
            v[-1]
        with self.assertRaises(TypeError):
            v[1.5]  # type: ignore[index]

    def test_delitem_erases_without_coercion(self) -> None:
        v = JSONValue({"a": 1, "b": 2})
        del v["a"]
        del v["missing"]
        self.assertEqual(v, JSONValue({"b": 2}))
        n = JSONValue(3)
        del n["x"]
        self.assertTrue(n.is_number())


class MutationTests(unittest.TestCase):
    def test_push_pop_insert(self) -> None:
        v = JSONValue()
        v.push(1)
        v.push(3)
        v.insert(1, 2)
        v.insert(99, 4)
        self.assertEqual(v.to_python(), [1.0, 2.0, 3.0, 4.0])
        v.pop()
        self.assertEqual(v.to_python(), [1.0, 2.0, 3.0])

    def test_pop_on_non_array_is_noop(self) -> None:
        v = JSONValue("s")
        v.pop()
        self.assertEqual(v.get_string(), "s")
        empty = JSONValue([])
        empty.pop()
        self.assertTrue(empty.is_array())

    def test_erase_range(self) -> None:
        v = JSONValue([0, 1, 2, 3, 4])
        v.erase(1, 2)
        self.assertEqual(v.to_python(), [0.0, 3.0, 4.0])
        v.erase(2, 5)
        self.assertEqual(v.size(), 3)
        v.erase(0, 0)
        self.assertEqual(v.size(), 3)

    def test_erase_key(self) -> None:
        v = JSONValue({"a": 1})
        self.assertTrue(v.erase_key("a"))
        self.assertFalse(v.erase_key("a"))
        self.assertFalse(JSONValue([1]).erase_key("a"))

    def test_insert_pair_overwrites(self) -> None:
        v = JSONValue()
        v.insert_pair(("a", 1))
        v.insert_pair(("a", 2))
        self.assertEqual(v.size(), 1)
        self.assertEqual(v.get("a").get_number(), 2)

    def test_resize(self) -> None:
        v = JSONValue("x")
        v.resize(3)
        self.assertTrue(v.is_array())
        self.assertEqual(v.size(), 3)
        self.assertTrue(all(item.is_null() for item in v.get_array()))
        v.resize(1)
        self.assertEqual(v.size(), 1)

    def test_clear(self) -> None:
        v = JSONValue({"a": 1})
        v.clear()
        self.assertTrue(v.is_object())
        self.assertTrue(v.is_empty())
        n = JSONValue(1)
        n.clear()
        self.assertEqual(n.get_number(), 1)


class OwnershipTests(unittest.TestCase):
    def test_stored_values_are_copied(self) -> None:
        child = JSONValue([1])
        parent = JSONValue()
        parent["c"] = child
        child.push(2)
        self.assertEqual(parent["c"].size(), 1)

    def test_copy_is_deep(self) -> None:
        original = JSONValue({"a": [1, {"b": 2}]})
        for duplicate in (original.copy(), copy.copy(original), copy.deepcopy(original), JSONValue(original)):
            duplicate["a"][1]["b"] = 3
            self.assertEqual(original["a"][1]["b"].get_number(), 2)
            self.assertIsNot(duplicate["a"], original["a"])

    def test_self_insertion_copies_first(self) -> None:
        v = JSONValue([1])
        v.push(v)
        self.assertEqual(v.size(), 2)
        self.assertEqual(v.at(1).to_python(), [1.0])


class EqualityTests(unittest.TestCase):
    def test_structural_equality(self) -> None:
        self.assertEqual(JSONValue([1, "a", None]), JSONValue([1.0, "a", None]))
        self.assertNotEqual(JSONValue([1, 2]), JSONValue([2, 1]))
        self.assertNotEqual(JSONValue([1]), JSONValue([1, 1]))

    def test_object_equality_ignores_order(self) -> None:
        self.assertEqual(JSONValue({"a": 1, "b": 2}), JSONValue({"b": 2, "a": 1}))
        self.assertNotEqual(JSONValue({"a": 1}), JSONValue({"a": 1, "b": 2}))

    def test_bool_and_number_differ(self) -> None:
        self.assertNotEqual(JSONValue(True), JSONValue(1))
        self.assertNotEqual(JSONValue(0), JSONValue(None))
        self.assertNotEqual(JSONValue(""), JSONValue([]))

    def test_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(JSONValue())

    def test_deep_trees_copy_and_compare(self) -> None:
        value = JSONValue()
        node = value
        for depth in range(2000):
            node = node["k"] if depth % 2 else node[0]
        duplicate = value.copy()
        self.assertEqual(duplicate, value)
        node.set(1)
        self.assertNotEqual(duplicate, value)
        self.assertEqual(copy.deepcopy(value), value)


if __name__ == "__main__":
    unittest.main()
