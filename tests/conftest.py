"""Shared fixtures for tagattrs tests."""

import pytest

import tagattrs


@pytest.fixture
def list_doc():
    """A small list with classes and ids."""
    return tagattrs.load(
        """
        <ul id="fruits">
            <li class="apple" id="a">Apple</li>
            <li class="orange" id="b">Orange</li>
            <li class="pear red" id="c">Pear</li>
        </ul>
        """
    )


@pytest.fixture
def form_doc():
    """A form with the common control kinds."""
    return tagattrs.load(
        """
        <form id="signup">
            <input type="text" name="user" value="alice">
            <input type="radio" name="plan" value="free" checked="checked">
            <input type="radio" name="plan" value="pro">
            <input type="radio" name="plan" value="team">
            <input type="radio" name="size" value="s" checked="checked">
            <textarea name="bio">Hello there</textarea>
            <select name="country">
                <option value="us">US</option>
                <option value="uk" selected="selected">UK</option>
                <option value="fr">FR</option>
            </select>
            <select name="tags" multiple="multiple">
                <option value="a">A</option>
                <option value="b">B</option>
                <option value="c">C</option>
            </select>
        </form>
        """
    )
