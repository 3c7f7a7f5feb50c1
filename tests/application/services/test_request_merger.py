# tests/application/services/test_request_merger.py
import pytest

from application.services.request_merger import (
    FORM_CONTENT_TYPE,
    build_cookie_header,
    build_default_headers,
    compose_request,
    encode_form_data,
    inject_cookie_header,
    merge_cookie_overrides,
    merge_headers,
    overlay_requests,
)
from domain.request import StepRequest
from domain.walk import StepConfig, WalkConfig


class TestMergeHeaders:
    def test_later_source_wins_case_insensitively(self):
        merged = merge_headers({"Accept": "text/html"}, {"ACCEPT": "application/json"})
        assert merged == {"accept": "application/json"}

    def test_keys_are_lower_cased(self):
        merged = merge_headers({"X-Token": "a", "User-Agent": "ua"})
        assert merged == {"x-token": "a", "user-agent": "ua"}

    def test_none_sources_are_skipped(self):
        assert merge_headers(None, {"a": "1"}, None) == {"a": "1"}

    def test_idempotent_for_identical_sources(self):
        source = {"Accept": "*/*", "X-A": "1"}
        assert merge_headers(source, source) == merge_headers(source)

    def test_precedence_defaults_walk_step_prepare(self):
        merged = merge_headers(
            {"user-agent": "default", "accept": "*/*"},
            {"User-Agent": "walk"},
            {"user-agent": "step", "x-step": "1"},
            {"USER-AGENT": "prepare"},
        )
        assert merged == {"user-agent": "prepare", "accept": "*/*", "x-step": "1"}


class TestCookieHeader:
    def test_site_then_overrides(self):
        assert build_cookie_header("a=1", {"b": "2"}) == "a=1;b=2"

    def test_empty(self):
        assert build_cookie_header("", {}) == ""

    def test_only_overrides(self):
        assert build_cookie_header("", {"b": "2", "c": "3"}) == "b=2;c=3"

    def test_only_site(self):
        assert build_cookie_header("a=1; z=9", {}) == "a=1; z=9"

    def test_override_appended_after_same_named_jar_cookie(self):
        assert build_cookie_header("sid=jar", {"sid": "forced"}) == "sid=jar;sid=forced"

    def test_merge_cookie_overrides_precedence(self):
        merged = merge_cookie_overrides({"a": "walk", "b": "walk"}, {"b": "step"}, {"c": "prepare"})
        assert merged == {"a": "walk", "b": "step", "c": "prepare"}


class TestInjectCookieHeader:
    def test_appends_to_existing_cookie_header(self):
        headers = {"cookie": " x=1 ", "accept": "*/*"}
        result = inject_cookie_header(headers, "a=1")
        assert result == {"cookie": "x=1;a=1", "accept": "*/*"}
        # the input mapping is left alone
        assert headers["cookie"] == " x=1 "

    def test_sets_cookie_when_absent(self):
        assert inject_cookie_header({}, "a=1") == {"cookie": "a=1"}

    def test_never_emits_empty_cookie_header(self):
        headers = {"accept": "*/*"}
        assert inject_cookie_header(headers, "") is headers
        assert "cookie" not in inject_cookie_header(headers, "")


class TestEncodeFormData:
    def test_percent_encodes_like_uri_component(self):
        assert encode_form_data({"a": "x y", "b": "1"}) == "a=x%20y&b=1"

    def test_reserved_characters(self):
        assert encode_form_data({"q": "a&b=c/d"}) == "q=a%26b%3Dc%2Fd"
        assert encode_form_data({"k": "it's (ok)!*~"}) == "k=it's%20(ok)!*~"

    def test_unicode(self):
        assert encode_form_data({"name": "é"}) == "name=%C3%A9"

    def test_empty_mapping_is_no_body(self):
        assert encode_form_data({}) is None
        assert encode_form_data(None) is None

    def test_list_values_repeat_the_key(self):
        assert encode_form_data({"d": ["1", "2"], "e": "3"}) == "d=1&d=2&e=3"


class TestOverlayRequests:
    def test_later_non_none_fields_win(self):
        merged = overlay_requests(
            StepRequest(method="GET", body="a", timeout_sec=5),
            StepRequest(method="PUT"),
        )
        assert merged.method == "PUT"
        assert merged.body == "a"
        assert merged.timeout_sec == 5


class TestComposeRequest:
    def _compose(self, request=None, prepared=None, config=None, site=""):
        step = StepConfig(url="https://example.com/x", request=request or StepRequest())
        return compose_request(
            config or WalkConfig(steps=(step,)),
            step,
            prepared or StepRequest(),
            site,
            default_headers={"accept": "*/*"},
        )

    def test_defaults_to_get_without_body(self):
        req = self._compose()
        assert req.method == "GET"
        assert req.body is None
        assert req.allow_redirects is True
        assert "cookie" not in req.headers

    def test_form_data_makes_post_with_form_content_type(self):
        req = self._compose(StepRequest(form_data={"user": "alice", "pw": "a b"}))
        assert req.method == "POST"
        assert req.body == "user=alice&pw=a%20b"
        assert req.headers["content-type"] == FORM_CONTENT_TYPE

    def test_explicit_content_type_is_kept(self):
        req = self._compose(StepRequest(headers={"Content-Type": "text/plain"}, form_data={"a": "1"}))
        assert req.headers["content-type"] == "text/plain"
        assert req.body == "a=1"

    def test_explicit_body_beats_form_data(self):
        req = self._compose(StepRequest(body='{"a":1}', form_data={"a": "1"}))
        assert req.body == '{"a":1}'
        assert "content-type" not in req.headers
        assert req.method == "POST"

    def test_explicit_method_is_kept(self):
        req = self._compose(StepRequest(method="put", form_data={"a": "1"}))
        assert req.method == "PUT"

    def test_prepare_form_data_overrides_step_form_data(self):
        req = self._compose(
            StepRequest(form_data={"a": "1", "b": "2"}),
            prepared=StepRequest(form_data={"b": "3"}),
        )
        assert req.body == "a=1&b=3"

    def test_cookie_header_combines_jar_and_overrides(self):
        step = StepConfig(url="https://example.com/x", request=StepRequest(cookies={"step": "s"}))
        config = WalkConfig(steps=(step,), cookies={"walk": "w"})
        req = compose_request(config, step, StepRequest(cookies={"prep": "p"}), "jar=j", default_headers={})
        assert req.headers["cookie"] == "jar=j;walk=w;step=s;prep=p"

    def test_static_cookie_header_is_kept_in_front(self):
        req = self._compose(StepRequest(headers={"Cookie": "static=1"}), site="jar=j")
        assert req.headers["cookie"] == "static=1;jar=j"

    def test_transport_request_has_no_cookie_or_form_fields(self):
        req = self._compose(StepRequest(cookies={"a": "1"}, form_data={"b": "2"}))
        assert not hasattr(req, "cookies")
        assert not hasattr(req, "form_data")

    def test_transport_options_pass_through(self):
        req = self._compose(StepRequest(timeout_sec=3, allow_redirects=False))
        assert req.timeout_sec == 3
        assert req.allow_redirects is False

    def test_default_headers_include_user_agent(self):
        headers = build_default_headers()
        assert headers["user-agent"].startswith("webwalk/")
        assert build_default_headers("custom/1")["user-agent"] == "custom/1"

    def test_step_template_is_not_mutated(self):
        template = StepRequest(headers={"X-A": "1"}, form_data={"a": "1"})
        self._compose(template, prepared=StepRequest(headers={"X-A": "2"}))
        assert template.headers == {"X-A": "1"}
        assert template.form_data == {"a": "1"}
