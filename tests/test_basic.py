import unittest
from notqwerty import Accepted, Rejected, WeakPassword, WordlistRegistry, evaluate

class TestNotQwerty(unittest.TestCase):
    def test_registry_creation(self):
        registry = WordlistRegistry(default_source=lambda: ["qwerty123"])
        self.assertEqual(registry.list_keys(), [])
        self.assertFalse(registry.initialized)
    
    def test_evaluate(self):
        registry = WordlistRegistry(default_source=lambda: ["qwerty123"])
        registry.initialize()
        self.assertEqual(evaluate("qwerty123", registry=registry), Rejected(WeakPassword()))
        self.assertIsInstance(evaluate("Correct-Horse-42", registry=registry), Accepted)

if __name__ == "__main__":
    unittest.main()
