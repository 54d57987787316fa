import random
import unittest

from appgrid.collection import SortedCollection
from appgrid.entry import AppFlags, Entry
from appgrid.filtering import ALL_APPS, describe_selector, matches, parse_selector, project
from appgrid.ordering import title_key


def make_entry(title, flags=0, name=None):
    return Entry(
        component="com.example/.{}".format(name or title.replace(" ", "")),
        title=title,
        flags=flags,
    )


def titles(entries):
    return [entry.title for entry in entries]


class TestSortedCollection(unittest.TestCase):

    def assertInvariants(self, collection):
        keys = [title_key(entry) for entry in collection]
        self.assertEqual(keys, sorted(keys))
        identities = [entry.identity for entry in collection]
        self.assertEqual(len(identities), len(set(identities)))

    def test_set_sorts(self):
        collection = SortedCollection([make_entry("Cherry"), make_entry("apple"), make_entry("Banana")])
        self.assertEqual(titles(collection), ["apple", "Banana", "Cherry"])

    def test_set_drops_duplicate_identities(self):
        collection = SortedCollection([
            make_entry("Cherry", name="Fruit"),
            make_entry("Apple", name="Fruit"),
            make_entry("Banana"),
        ])
        self.assertEqual(titles(collection), ["Banana", "Cherry"])

    def test_insert_in_place(self):
        collection = SortedCollection([make_entry("Banana"), make_entry("Date")])
        collection.insert([make_entry("Cherry"), make_entry("Aardvark"), make_entry("Zebra")])
        self.assertEqual(titles(collection), ["Aardvark", "Banana", "Cherry", "Date", "Zebra"])

    def test_insert_existing_identity_is_untouched(self):
        collection = SortedCollection([make_entry("Banana", name="B")])
        collection.insert([make_entry("Renamed", name="B", flags=AppFlags.SYSTEM)])
        self.assertEqual(len(collection), 1)
        self.assertEqual(collection[0].title, "Banana")
        self.assertEqual(collection[0].flags, 0)

    def test_insert_keeps_equal_titles(self):
        collection = SortedCollection([make_entry("Mail", name="MailA")])
        collection.insert([make_entry("Mail", name="MailB"), make_entry("mail", name="MailC")])
        self.assertEqual(len(collection), 3)
        self.assertEqual(
            [entry.identity.class_name for entry in collection],
            ["com.example.MailA", "com.example.MailB", "com.example.MailC"],
        )

    def test_remove(self):
        a, b, c = make_entry("A"), make_entry("B"), make_entry("C")
        collection = SortedCollection([a, b, c])
        removed = collection.remove([make_entry("whatever", name="B"), make_entry("Missing")])
        self.assertEqual(titles(removed), ["B"])
        self.assertEqual(titles(collection), ["A", "C"])
        self.assertNotIn(b, collection)
        self.assertIn(a.identity, collection)

    def test_remove_own_entries(self):
        collection = SortedCollection([make_entry(letter) for letter in "ABCDEFG"])
        removed = collection.remove(collection.entries)
        self.assertEqual(titles(removed), list("ABCDEFG"))
        self.assertEqual(len(collection), 0)
        self.assertNotIn(make_entry("A"), collection)

    def test_remove_absent_is_noop(self):
        collection = SortedCollection([make_entry("A")])
        self.assertEqual(collection.remove([make_entry("B")]), [])
        self.assertEqual(titles(collection), ["A"])
        self.assertEqual(collection.remove([]), [])

    def test_update_resorts_renamed_entry(self):
        collection = SortedCollection([make_entry("Apple", name="X"), make_entry("Banana"), make_entry("Cherry")])
        removed = collection.update([make_entry("Dragonfruit", name="X")])
        self.assertEqual(titles(removed), ["Apple"])
        self.assertEqual(titles(collection), ["Banana", "Cherry", "Dragonfruit"])
        self.assertEqual(collection.get(removed[0].identity).title, "Dragonfruit")

    def test_update_inserts_absent_entries(self):
        collection = SortedCollection([make_entry("Banana")])
        self.assertEqual(collection.update([make_entry("Apple")]), [])
        self.assertEqual(titles(collection), ["Apple", "Banana"])

    def test_index_of(self):
        entries = [make_entry("A"), make_entry("B")]
        collection = SortedCollection(entries)
        self.assertEqual(collection.index_of(entries[1].identity), 1)
        self.assertEqual(collection.index_of(make_entry("C").identity), -1)

    def test_random_operations_keep_invariants(self):
        rng = random.Random(0)
        words = ["app{:02d}".format(i) for i in range(40)]
        collection = SortedCollection()
        for _ in range(300):
            batch = [
                make_entry(rng.choice(words).upper() if rng.random() < 0.5 else rng.choice(words), name=rng.choice(words))
                for _ in range(rng.randint(0, 4))
            ]
            op = rng.choice(["insert", "remove", "update"])
            getattr(collection, op)(batch)
            self.assertInvariants(collection)


class TestFilterProjection(unittest.TestCase):

    def setUp(self):
        self.entries = [
            make_entry("A"),
            make_entry("B", flags=AppFlags.SYSTEM),
            make_entry("C", flags=AppFlags.DOWNLOADED),
            make_entry("D", flags=AppFlags.SYSTEM | AppFlags.UPDATED_SYSTEM_APP),
            make_entry("E", flags=AppFlags.UPDATED_SYSTEM_APP),
        ]

    def test_all_apps_aliases_input(self):
        self.assertIs(project(self.entries, ALL_APPS), self.entries)

    def test_projection_keeps_order(self):
        self.assertEqual(titles(project(self.entries, AppFlags.SYSTEM)), ["B", "D"])
        self.assertEqual(
            titles(project(self.entries, AppFlags.SYSTEM | AppFlags.DOWNLOADED)),
            ["B", "C", "D"],
        )
        self.assertEqual(titles(project(self.entries, AppFlags.UPDATED_SYSTEM_APP)), ["D", "E"])
        self.assertEqual(project(self.entries, 0), [])

    def test_projection_matches_predicate(self):
        for selector in [ALL_APPS, 0, 1, 2, 3, 4, 5, 6, 7]:
            self.assertEqual(
                list(project(self.entries, selector)),
                [entry for entry in self.entries if matches(entry, selector)],
            )

    def test_parse_selector(self):
        self.assertEqual(parse_selector([]), ALL_APPS)
        self.assertEqual(parse_selector(["system"]), AppFlags.SYSTEM)
        self.assertEqual(parse_selector(["system", "downloaded"]), 5)
        with self.assertRaises(ValueError):
            parse_selector(["games"])

    def test_describe_selector(self):
        self.assertEqual(describe_selector(ALL_APPS), "all")
        self.assertEqual(describe_selector(5), "downloaded|system")
        self.assertEqual(describe_selector(0), "none")
