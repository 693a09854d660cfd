"""Unit tests for FakeUserRepository — verifies Port contract compliance."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository behaves like the SQL repository."""

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_list_all_empty(self):
        self.assertEqual(self.repo.list_all(), [])

    def test_create_then_list(self):
        self.assertIsNone(self.repo.create(name='Ada', email='ada@example.com'))

        users = self.repo.list_all()
        self.assertEqual(len(users), 1)
        self.assertIsInstance(users[0], User)
        self.assertEqual(users[0].name, 'Ada')
        self.assertEqual(users[0].email, 'ada@example.com')
        self.assertIsNotNone(users[0].created_at.tzinfo)

    def test_list_all_keeps_insertion_order(self):
        for name in ('Ada', 'Grace', 'Edsger'):
            self.repo.create(name=name, email=f'{name.lower()}@example.com')

        self.assertEqual([u.name for u in self.repo.list_all()], ['Ada', 'Grace', 'Edsger'])

    def test_duplicate_email_raises(self):
        self.repo.create(name='Ada', email='ada@example.com')

        with self.assertRaises(DuplicateError) as ctx:
            self.repo.create(name='Other', email='ada@example.com')

        self.assertEqual(ctx.exception.field, 'email')
        self.assertEqual(len(self.repo.list_all()), 1)


if __name__ == '__main__':
    unittest.main()
