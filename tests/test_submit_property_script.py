from unittest.mock import Mock, patch

import requests

from scripts.submit_property import parse_args, submit_property


def _response(status_code, headers=None, json_body=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_body
    return response


def test_parse_args_maps_flags_to_wire_names():
    args = parse_args(["--title", "Example title", "--asking-price", "$100"])

    assert args.title == "Example title"
    assert args.askingPrice == "$100"
    assert args.img == ""


@patch("scripts.submit_property.requests.post")
def test_redirect_to_root_means_created(mock_post, monkeypatch, example_body):
    monkeypatch.setenv("APP_URL", "http://app.local")
    mock_post.return_value = _response(303, headers={"location": "/"})

    assert submit_property(example_body) is True
    mock_post.assert_called_once_with(
        "http://app.local/add-property", data=example_body, allow_redirects=False, timeout=30
    )


@patch("scripts.submit_property.requests.post")
def test_error_response_is_reported(mock_post, capsys, example_body):
    mock_post.return_value = _response(502, json_body={"error": "The properties service answered with status 500"})

    assert submit_property(example_body) is False
    assert "status 500" in capsys.readouterr().out


@patch("scripts.submit_property.requests.post")
def test_unreachable_app_is_reported(mock_post, capsys, example_body):
    mock_post.side_effect = requests.exceptions.ConnectionError("refused")

    assert submit_property(example_body) is False
    assert "Error submitting property" in capsys.readouterr().out
