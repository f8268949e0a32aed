import random
import unittest
from datetime import date, datetime, time, timedelta
from uuid import uuid4
from mealplanner.domain.Meal import Meal
from mealplanner.domain.MealAssignment import MealAssignment
from mealplanner.infra.Assignment_Repository import AssignmentRepository, InMemoryAssignmentRepository
from mealplanner.infra.Storage import InMemoryBackend, StorageManager
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.utilities.exceptions import DecodeFailure


class TestAssignmentRepository(unittest.TestCase):

    def setUp(self):
        self.storage = StorageManager(InMemoryBackend())
        self.repo = AssignmentRepository(self.storage)

    def test_empty(self):
        self.assertEqual(self.repo.fetch_all(), [])
        self.assertEqual(self.repo.fetch_for(date(2024, 1, 1)), [])

    def test_save_appends_in_order(self):
        first = MealAssignment(uuid4(), date(2024, 1, 2))
        second = MealAssignment(uuid4(), date(2024, 1, 1))
        self.repo.save(first)
        self.repo.save(second)
        self.assertEqual(self.repo.fetch_all(), [first, second])

    def test_fetch_for_matches_any_time_on_same_day(self):
        rng = random.Random(3)
        for _ in range(30):
            day = date(2020, 1, 1) + timedelta(days=rng.randint(0, 3000))
            t1 = datetime.combine(day, time(rng.randint(0, 23), rng.randint(0, 59)))
            t2 = datetime.combine(day, time(rng.randint(0, 23), rng.randint(0, 59)))
            assignment = MealAssignment(uuid4(), t1)
            self.repo.save(assignment)
            with self.subTest(t1=t1, t2=t2):
                self.assertIn(assignment.id, [a.id for a in self.repo.fetch_for(t2)])

    def test_fetch_for_excludes_other_days(self):
        self.repo.save(MealAssignment(uuid4(), date(2024, 2, 28)))
        self.repo.save(MealAssignment(uuid4(), date(2024, 3, 1)))
        self.assertEqual(self.repo.fetch_for(datetime(2024, 2, 29, 12, 0)), [])

    def test_multiple_meals_same_day(self):
        day = date(2024, 7, 4)
        meal_ids = [uuid4() for _ in range(5)]
        for meal_id in meal_ids:
            self.repo.save(MealAssignment(meal_id, day))
        found = self.repo.fetch_for(day)
        self.assertEqual(len(found), 5)
        self.assertEqual({a.meal_id for a in found}, set(meal_ids))

    def test_duplicate_meal_and_day_both_persist(self):
        meal_id = uuid4()
        self.repo.save(MealAssignment(meal_id, date(2024, 7, 4)))
        self.repo.save(MealAssignment(meal_id, datetime(2024, 7, 4, 18, 0)))
        self.assertEqual(len(self.repo.fetch_for(date(2024, 7, 4))), 2)

    def test_delete(self):
        day = date(2024, 5, 5)
        keep = MealAssignment(uuid4(), day)
        gone = MealAssignment(uuid4(), day)
        self.repo.save(keep)
        self.repo.save(gone)
        self.repo.delete(gone.id)
        self.assertNotIn(gone.id, [a.id for a in self.repo.fetch_for(day)])
        self.assertEqual(self.repo.fetch_all(), [keep])

    def test_delete_missing_is_noop(self):
        assignment = MealAssignment(uuid4(), date(2024, 5, 5))
        self.repo.save(assignment)
        self.repo.delete(uuid4())
        self.assertEqual(self.repo.fetch_all(), [assignment])

    def test_dangling_meal_reference_is_kept(self):
        meals = MealRepository(self.storage)
        meal = Meal("Short-lived")
        meals.save(meal)
        assignment = MealAssignment(meal.id, date(2024, 8, 1))
        self.repo.save(assignment)
        meals.delete(meal.id)
        self.assertEqual(self.repo.fetch_all(), [assignment])

    def test_reading_meal_key_fails_loudly(self):
        meals = MealRepository(self.storage)
        meals.save(Meal("Soup"))
        confused = AssignmentRepository(self.storage, key="meals")
        with self.assertRaises(DecodeFailure):
            confused.fetch_all()


class TestInMemoryAssignmentRepository(unittest.TestCase):

    def test_same_semantics(self):
        repo = InMemoryAssignmentRepository()
        assignment = MealAssignment(uuid4(), datetime(2024, 9, 9, 13, 0))
        repo.save(assignment)
        self.assertEqual(repo.fetch_for(date(2024, 9, 9)), [assignment])
        repo.delete(assignment.id)
        self.assertEqual(repo.fetch_all(), [])


if __name__ == '__main__':
    unittest.main()
