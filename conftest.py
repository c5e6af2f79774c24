import os

# pytest-django reads the settings module from pyproject.toml; this covers
# running the suite from an IDE that skips it.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'eshift_core.test_settings')
