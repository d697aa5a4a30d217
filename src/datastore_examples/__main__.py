"""`python -m datastore_examples` 진입점."""

from datastore_examples.main import main

if __name__ == "__main__":
    main()
