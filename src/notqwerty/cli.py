#!/usr/bin/env python3
"""
notqwerty - weak password gate
Interactive terminal front end for checking passwords and managing word lists.
"""

from getpass import getpass
from typing import Optional

import pyperclip

from .config import Settings, load_settings
from .errors import NotQwertyError
from .logger import security_logger
from .messages import default_message
from .strength import Rejected, evaluate
from .wordlist import WordlistRegistry, get_default_registry

def print_banner():
    """Display application banner."""
    banner = """
    ╔═══════════════════════════════════════╗
    ║          N O T Q W E R T Y            ║
    ║        Weak Password Gate v1.0        ║
    ╚═══════════════════════════════════════╝
    """
    print(banner)

def report(password: str, registry: WordlistRegistry, min_length: int):
    """Evaluate a password and print the verdict."""
    result = evaluate(password, min_length, registry)
    if isinstance(result, Rejected):
        security_logger.log_evaluation(False, result.reason.tag)
        print(f"✗ Rejected: {default_message(result.reason)}")
    else:
        security_logger.log_evaluation(True)
        print("✓ Password accepted")

def show_wordlists(registry: WordlistRegistry):
    """Print loaded word lists with size and fingerprint."""
    keys = registry.list_keys()
    if not keys:
        print("No word lists loaded.")
        return
    print("\nLoaded word lists:")
    for i, key in enumerate(keys, 1):
        word_set = registry.get(key)
        if word_set is None:
            continue
        marker = " (default)" if key == registry.default_key else ""
        print(f"  {i}. {key}{marker} - {len(word_set)} words, sha256 {word_set.fingerprint[:12]}")

def interactive_menu(registry: WordlistRegistry, settings: Settings):
    """Interactive command-line interface."""
    while True:
        print("\n" + "="*50)
        print("MAIN MENU")
        print("="*50)
        print("1. Check a password")
        print("2. Check password on clipboard")
        print("3. Load word list file")
        print("4. Remove word list")
        print("5. List word lists")
        print("6. Exit")

        choice = input("\nSelect option (1-6): ").strip()

        if choice == "1":
            password = getpass("Password: ")
            report(password, registry, settings.min_length)

        elif choice == "2":
            password = pyperclip.paste()
            if not password:
                print("Clipboard is empty.")
            else:
                report(password, registry, settings.min_length)

        elif choice == "3":
            path = input("Word list path: ").strip()
            try:
                key = registry.push_file(path)
                print(f"✓ Loaded word list {key}")
            except NotQwertyError as e:
                print(f"Error: {str(e)}")

        elif choice == "4":
            key = input("Word list name: ").strip()
            if key == registry.default_key:
                print("The default word list cannot be removed.")
            elif registry.get(key) is None:
                print(f"No word list named {key}")
            else:
                registry.remove(key)
                print(f"✓ Removed word list {key}")

        elif choice == "5":
            show_wordlists(registry)

        elif choice == "6":
            print("Goodbye!")
            break

        else:
            print("Invalid choice. Please try again.")

def main(registry: Optional[WordlistRegistry] = None):
    """Main application entry point."""
    print_banner()

    try:
        settings = load_settings()
    except NotQwertyError as e:
        print(f"Configuration error: {str(e)}")
        return 1

    if settings.log_file:
        security_logger.add_log_file(settings.log_file)

    if registry is None:
        registry = get_default_registry()
    else:
        registry.initialize()

    for path in settings.wordlists:
        try:
            key = registry.push_file(path)
            print(f"Loaded word list {key}")
        except NotQwertyError as e:
            print(f"Skipping word list: {str(e)}")

    interactive_menu(registry, settings)
    return 0

if __name__ == "__main__":
    main()
