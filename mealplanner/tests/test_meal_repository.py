import random
import string
import unittest
from uuid import uuid4
from mealplanner.domain.Meal import Meal
from mealplanner.infra.Meal_Repository import InMemoryMealRepository, MealRepository
from mealplanner.infra.Storage import InMemoryBackend, StorageManager
from mealplanner.utilities.exceptions import DecodeFailure, EncodeFailure

TAGS = ["Chicken", "chicken", "Beef", "Tofu", "Rice", "Pasta", "Quinoa", "", "Vegetables", "Cheese", "Beans"]


def _random_meal(rng: random.Random) -> Meal:
    description = "".join(rng.choice(string.ascii_letters + " ") for _ in range(rng.randint(1, 30))) + "x"
    return Meal(description, rng.choice(TAGS), rng.choice(TAGS),
                rng.sample(TAGS, rng.randint(0, 4)))


class TestMealRepository(unittest.TestCase):

    def setUp(self):
        self.backend = InMemoryBackend()
        self.repo = MealRepository(StorageManager(self.backend))

    def test_empty(self):
        self.assertEqual(self.repo.fetch_all(), [])

    def test_save_and_fetch(self):
        meal = Meal("Grilled Chicken with Rice", "Chicken", "Rice", ["Vegetables"])
        self.repo.save(meal)
        stored = [m for m in self.repo.fetch_all() if m.id == meal.id]
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0], meal)

    def test_save_existing_id_replaces_in_place(self):
        first, second = Meal("A"), Meal("B")
        self.repo.save(first)
        self.repo.save(second)
        self.repo.save(first.replace("A2", "Tofu", "", []))
        meals = self.repo.fetch_all()
        self.assertEqual([m.description for m in meals], ["A2", "B"])
        self.assertEqual(meals[0].created_at, first.created_at)

    def test_update_is_upsert(self):
        meal = Meal("Porridge", "", "Oats")
        self.repo.update(meal)
        self.assertEqual(self.repo.fetch_all(), [meal])
        self.repo.update(meal.replace("Porridge", "", "Oats", ["Berries"]))
        self.assertEqual(len(self.repo.fetch_all()), 1)
        self.assertEqual(self.repo.get(meal.id).other_components, ["Berries"])

    def test_delete(self):
        keep, gone = Meal("Keep"), Meal("Gone")
        self.repo.save(keep)
        self.repo.save(gone)
        self.repo.delete(gone.id)
        self.assertEqual(self.repo.fetch_all(), [keep])
        self.assertIsNone(self.repo.get(gone.id))

    def test_delete_missing_is_noop(self):
        meal = Meal("Soup")
        self.repo.save(meal)
        self.repo.delete(uuid4())
        self.assertEqual(self.repo.fetch_all(), [meal])

    def test_round_trip_random_meals(self):
        rng = random.Random(7)
        for _ in range(50):
            meal = _random_meal(rng)
            self.repo.save(meal)
            with self.subTest(meal=meal):
                matches = [m for m in self.repo.fetch_all() if m.id == meal.id]
                self.assertEqual(len(matches), 1)
                self.assertEqual(matches[0].description, meal.description)
                self.assertEqual(matches[0].primary_protein, meal.primary_protein)
                self.assertEqual(matches[0].primary_carb, meal.primary_carb)
                self.assertEqual(matches[0].other_components, meal.other_components)

    def test_retrieval_completeness(self):
        rng = random.Random(11)
        for size in (0, 1, 5, 25):
            repo = MealRepository(StorageManager(InMemoryBackend()))
            meals = [_random_meal(rng) for _ in range(size)]
            for meal in meals:
                repo.save(meal)
            fetched = {m.id: m for m in repo.fetch_all()}
            with self.subTest(size=size):
                self.assertEqual(set(fetched), {m.id for m in meals})
                for meal in meals:
                    self.assertEqual(fetched[meal.id], meal)

    def test_decode_failure_propagates(self):
        self.backend.write("meals", "garbage")
        with self.assertRaises(DecodeFailure):
            self.repo.fetch_all()
        with self.assertRaises(DecodeFailure):
            self.repo.save(Meal("Anything"))

    def test_failed_save_keeps_stored_collection(self):
        meal = Meal("Tacos", "Pork", "Tortilla")
        self.repo.save(meal)
        with self.assertRaises(EncodeFailure):
            self.repo.save(Meal(description=object()))
        self.assertEqual(self.repo.fetch_all(), [meal])


class TestInMemoryMealRepository(unittest.TestCase):

    def test_same_semantics(self):
        meal = Meal("Bagel", "", "Bread")
        repo = InMemoryMealRepository([meal])
        repo.update(meal.replace("Bagel", "Salmon", "Bread", ["Capers"]))
        repo.save(Meal("Fruit"))
        self.assertEqual(len(repo.fetch_all()), 2)
        self.assertEqual(repo.get(meal.id).primary_protein, "Salmon")
        repo.delete(meal.id)
        repo.delete(meal.id)
        self.assertEqual([m.description for m in repo.fetch_all()], ["Fruit"])


if __name__ == '__main__':
    unittest.main()
