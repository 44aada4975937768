import getpass
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from folio.core.security import get_password_hash

if __name__ == "__main__":
    password = sys.argv[1] if len(sys.argv) > 1 else getpass.getpass("Admin password: ")
    if not password:
        print("Error: password must not be empty.")
        sys.exit(1)
    print("Add this line to .env:")
    print(f"ADMIN_PASSWORD_HASH={get_password_hash(password)}")
