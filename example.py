"""Example: two network providers announce an outage to their users."""

from dotenv import load_dotenv
load_dotenv()

from netalert import User, mnetwork, telnet
from netalert.config import load_settings
from netalert.observability import configure_logging


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    provider = telnet()
    user = User("Gabriel")
    user.set_label(provider.get_label())
    provider.register(user)
    provider.notify_all(settings.outage_message)

    provider = mnetwork()
    user = User("Nikita")
    user.set_label(provider.get_label())
    provider.register(user)
    provider.notify_all(settings.outage_message)


if __name__ == "__main__":
    main()
