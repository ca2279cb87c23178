import pytest

from app.auth import otp as otp_module
from app.auth.otp import InMemoryOtpStore, OtpExchange
from app.core import errors


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_issued_code_is_six_digits(otp_exchange, mailer):
    code = otp_exchange.issue("a@x.com")

    assert len(code) == 6 and code.isdigit()
    assert 100000 <= int(code) <= 999999
    assert mailer.sent == [("a@x.com", code)]


def test_code_verifies_exactly_once(otp_exchange):
    code = otp_exchange.issue("a@x.com")

    otp_exchange.verify("a@x.com", code)
    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("a@x.com", code)


def test_wrong_code_does_not_consume(otp_exchange):
    code = otp_exchange.issue("a@x.com")
    wrong = "000000" if code != "000000" else "111111"

    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("a@x.com", wrong)
    otp_exchange.verify("a@x.com", code)


def test_reissue_replaces_previous_code(monkeypatch, otp_exchange):
    codes = iter(["123456", "654321"])
    monkeypatch.setattr(otp_module, "generate_otp", lambda: next(codes))

    otp_exchange.issue("a@x.com")
    otp_exchange.issue("a@x.com")

    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("a@x.com", "123456")
    otp_exchange.verify("a@x.com", "654321")


def test_codes_are_per_email(otp_exchange):
    code = otp_exchange.issue("a@x.com")

    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("b@x.com", code)


def test_verify_without_issue(otp_exchange):
    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("a@x.com", "123456")


def test_code_compared_as_string(monkeypatch, otp_exchange):
    monkeypatch.setattr(otp_module, "generate_otp", lambda: "123456")
    otp_exchange.issue("a@x.com")

    with pytest.raises(errors.InvalidOtp):
        otp_exchange.verify("a@x.com", " 123456")


@pytest.mark.parametrize("email", [None, ""])
def test_issue_requires_email(otp_exchange, email):
    with pytest.raises(errors.ValidationError):
        otp_exchange.issue(email)


@pytest.mark.parametrize("email,code", [(None, "123456"), ("a@x.com", None), ("", "")])
def test_verify_requires_both_fields(otp_exchange, email, code):
    with pytest.raises(errors.ValidationError):
        otp_exchange.verify(email, code)


def test_dispatch_failure_keeps_code_stored(mailer):
    mailer.ok = False
    store = InMemoryOtpStore()
    exchange = OtpExchange(store=store, send_email=mailer)

    with pytest.raises(errors.DispatchError):
        exchange.issue("a@x.com")

    code = mailer.last_code("a@x.com")
    assert store.get("a@x.com") == code
    exchange.verify("a@x.com", code)


def test_code_expires_after_ttl(mailer):
    clock = FakeClock()
    exchange = OtpExchange(InMemoryOtpStore(clock=clock), mailer, ttl_seconds=60, clock=clock)
    code = exchange.issue("a@x.com")

    clock.now += 60
    with pytest.raises(errors.InvalidOtp):
        exchange.verify("a@x.com", code)
    assert len(exchange.store) == 0


def test_code_valid_just_before_expiry(mailer):
    clock = FakeClock()
    exchange = OtpExchange(InMemoryOtpStore(clock=clock), mailer, ttl_seconds=60, clock=clock)
    code = exchange.issue("a@x.com")

    clock.now += 59
    exchange.verify("a@x.com", code)


def test_zero_ttl_never_expires(mailer):
    clock = FakeClock()
    exchange = OtpExchange(InMemoryOtpStore(clock=clock), mailer, ttl_seconds=0, clock=clock)
    code = exchange.issue("a@x.com")

    clock.now += 10 ** 9
    exchange.verify("a@x.com", code)


def test_put_drops_other_expired_entries(mailer):
    clock = FakeClock()
    exchange = OtpExchange(InMemoryOtpStore(clock=clock), mailer, ttl_seconds=60, clock=clock)
    for n in range(3):
        exchange.issue(f"user{n}@x.com")
    assert len(exchange.store) == 3

    clock.now += 60
    exchange.issue("fresh@x.com")

    assert len(exchange.store) == 1
    assert exchange.store.get("fresh@x.com") == mailer.last_code("fresh@x.com")
