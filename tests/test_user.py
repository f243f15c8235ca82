from netalert import User, telnet


def test_receive_prints_one_line(capsys):
    User("Gabriel").receive("hello")
    assert capsys.readouterr().out == "Gabriel received a message: hello\n"


def test_label_starts_empty_and_syncs_from_provider():
    user = User("Nikita")
    assert user.get_label() is None

    user.set_label(telnet().get_label())

    assert user.get_label() == "Blue"
    assert user.label == "Blue"


def test_users_compare_by_identity():
    assert User("Same") != User("Same")
    assert repr(User("Gabriel")) == "User(id='Gabriel')"
