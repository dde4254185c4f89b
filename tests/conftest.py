"""Shared pytest fixtures for formgrid tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from formgrid.domain.forms import Control, Form

SIGNUP_YAML = """\
name: signup
errors:
  - Please fix the highlighted fields
translations:
  Personal: Osobni
  Contact: Kontakt
components:
  - name: first
    label: First name
    required: true
    placeholder: First name
  - name: last
    label: Last name
  - name: email
    type: email
    required: true
    errors: [Invalid email]
  - name: phone
    prepend: "+420"
  - container: address
    label: Address
    description: Where we ship
    attrs:
      class: well
    components:
      - name: street
      - name: city
      - container: geo
        components:
          - name: lat
          - name: lng
  - name: token
    kind: hidden
  - name: send
    kind: submit
    label: Sign up
  - name: cancel
    kind: button
groups:
  - name: personal
    label: Personal
    controls: [first, last]
  - name: contact
    label: Contact
    controls: [email, phone]
    options:
      data-section: contact
  - name: internal
    visual: false
    controls: [token]
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def signup_form() -> Form:
    """A form with flat fields, a two-level container, buttons and groups.

    Layout::

        first, last, email, phone,
        address/{street, city, geo/{lat, lng}},
        token (hidden), send (submit), cancel (button)
    """
    form = Form("signup")
    first = form.add_control("first", caption="First name", required=True)
    last = form.add_control("last", caption="Last name")
    email = form.add_control("email", input_type="email", required=True)
    phone = form.add_control("phone")
    address = form.add_container("address")
    address.add_control("street")
    address.add_control("city")
    geo = address.add_container("geo")
    geo.add_control("lat")
    geo.add_control("lng")
    form.add(Control.hidden("token"))
    form.add(Control.submit("send", "Sign up"))
    form.add(Control.button("cancel", "Cancel"))

    form.add_group("personal", label="Personal").add(first, last)
    form.add_group("contact", label="Contact").add(email, phone)
    return form


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    """The signup form as a YAML definition document."""
    path = tmp_path / "signup.yml"
    path.write_text(SIGNUP_YAML, encoding="utf-8")
    return path


@pytest.fixture
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no formgrid env overrides."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "FORMGRID_CONFIG",
        "FORMGRID_QUIET",
        "FORMGRID_GRID__SUB_WIDTH",
        "FORMGRID_RENDERER__GROUP_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
