"""Interactive text menu over the user service."""

import sys
from typing import Callable, Optional, TextIO

from user_service.core.exceptions import UserServiceError
from user_service.core.logging import get_logger
from user_service.schemas.user import UserRead
from user_service.services.user_service import UserService

logger = get_logger(__name__)

MENU = """
=== USER SERVICE MENU ===
1. Create user
2. Find user by ID
3. Find user by email
4. Show all users
5. Update user
6. Delete user
0. Exit
========================="""


class ConsoleInterface:
    """Menu loop that reads operator input and renders results as text."""

    def __init__(
        self,
        user_service: UserService,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.user_service = user_service
        self.input_func = input_func
        self.output = output or sys.stdout
        self._actions = {
            1: self.create_user,
            2: self.find_user_by_id,
            3: self.find_user_by_email,
            4: self.show_all_users,
            5: self.update_user,
            6: self.delete_user,
        }

    def start(self) -> None:
        """Run the menu until the operator exits or input ends."""
        logger.info("Starting console interface")
        try:
            while True:
                self._print(MENU)
                choice = self._read_int("Choose an action: ")
                if choice == 0:
                    self._print("Exiting...")
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._print("Invalid choice. Try again.")
                    continue
                self._run(action)
        except EOFError:
            self._print("")
        logger.info("Console interface stopped")

    def _run(self, action: Callable[[], None]) -> None:
        try:
            action()
        except UserServiceError as e:
            logger.warning(f"{action.__name__} rejected: {e}")
            self._print(f"Error: {e}")

    def create_user(self) -> None:
        self._print("\n--- Create user ---")
        name = self._read_str("Name: ")
        email = self._read_str("Email: ")
        age = self._read_optional_int("Age (Enter to skip): ")

        user = self.user_service.create_user(name, email, age)
        self._print(f"User created: {self._render(user)}")

    def find_user_by_id(self) -> None:
        self._print("\n--- Find by ID ---")
        user_id = self._read_int("ID: ")

        user = self.user_service.get_user_by_id(user_id)
        if user is None:
            self._print(f"User with ID {user_id} not found")
        else:
            self._print(f"Found user: {self._render(user)}")

    def find_user_by_email(self) -> None:
        self._print("\n--- Find by email ---")
        email = self._read_str("Email: ")

        user = self.user_service.get_user_by_email(email)
        if user is None:
            self._print(f"User with email {email} not found")
        else:
            self._print(f"Found user: {self._render(user)}")

    def show_all_users(self) -> None:
        self._print("\n--- All users ---")
        users = self.user_service.get_all_users()
        if not users:
            self._print("No users found")
            return
        self._print(f"Users found: {len(users)}")
        for user in users:
            self._print(self._render(user))

    def update_user(self) -> None:
        self._print("\n--- Update user ---")
        user_id = self._read_int("User ID: ")

        existing = self.user_service.get_user_by_id(user_id)
        if existing is None:
            self._print(f"User with ID {user_id} not found")
            return
        self._print(f"Current data: {self._render(existing)}")

        name = self._read_str("New name: ")
        email = self._read_str("New email: ")
        age = self._read_optional_int("New age (Enter to skip): ")

        updated = self.user_service.update_user(user_id, name, email, age)
        self._print(f"User updated: {self._render(updated)}")

    def delete_user(self) -> None:
        self._print("\n--- Delete user ---")
        user_id = self._read_int("User ID: ")

        confirmation = self._read_str("Are you sure? (yes/no): ")
        if confirmation.lower() != "yes":
            self._print("Deletion cancelled")
            return

        if self.user_service.delete_user(user_id):
            self._print("User deleted")
        else:
            self._print(f"User with ID {user_id} not found")

    def _render(self, user) -> str:
        return UserRead.model_validate(user).display()

    def _print(self, text: str) -> None:
        print(text, file=self.output)

    def _read_str(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._read_str(prompt)
            try:
                return int(raw)
            except ValueError:
                self._print("Error: enter a whole number")

    def _read_optional_int(self, prompt: str) -> Optional[int]:
        raw = self._read_str(prompt)
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            self._print("Warning: not a number, the value will be left empty")
            return None
