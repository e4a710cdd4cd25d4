import time

import rollbook
from rollbook.logging_setup import setup_logging


def main() -> None:
    setup_logging()
    client = rollbook.run(port=57794)
    if isinstance(client, rollbook.RollbookServer):
        client = client.client()

    client.register({"rollNo": 7, "name": "Asha", "class": "X-B"})
    print(client.lookup(7))

    client.register({"rollNo": 7, "name": "Bala"})
    print(client.lookup(7))

    print(client.lookup(99))

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
