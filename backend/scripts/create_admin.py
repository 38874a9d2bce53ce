import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from database import Database
from db.init_db import init_database
from models import User
from services.relational_store import RelationalStore

username = os.environ.get('ADMIN_USERNAME', 'Admin')
email = os.environ.get('ADMIN_EMAIL', 'admin@localhost.com')
password = os.environ.get('ADMIN_PASSWORD', 'LocalHost')

database = Database(Config.SQLALCHEMY_DATABASE_URI)
init_database(database)
store = RelationalStore(database)

existing = store.get_user_by_username(username)

if existing:
    if existing.role != 'admin':
        store.upsert_user({'id': existing.id, 'role': 'admin'})
        print(f"Promoted user '{username}' ({existing.id}) to admin")
    else:
        print(f"User '{username}' already exists with ID {existing.id}")
else:
    user = store.upsert_user({
        'username': username,
        'email': email,
        'password_hash': User.hash_password(password),
        'role': 'admin',
        'permissions': [],
    })
    print(f"Created user '{username}' with ID {user.id}")
    print(f"Email: {email}")
