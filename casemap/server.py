#!/usr/bin/env python3
# Case lookups over HTTP:
#
#   GET /lowercase/U+0041 -> {"codepoint": "U+0041", "lowercase": "U+0061"}
#   GET /uppercase/0xff   -> {"codepoint": "U+00FF", "uppercase": "U+0178"}
#
# Run with `flask --app casemap.server run`.
from flask import Flask, jsonify, make_response
import http

from .case import NoCaseTarget, format_codepoint, to_lowercase, to_uppercase

app = Flask(__name__)

def parse_codepoint(s):
	"""Parses `U+00FF`, `0xff` or bare hex."""
	s = s.strip().upper()
	for prefix in ("U+", "0X"):
		if s.startswith(prefix):
			s = s[len(prefix):]
			break
	return int(s, 16)

def error(status, message, **kwargs):
	return make_response(jsonify(error=message, **kwargs), status)

def sibling(convert, target, value):
	try:
		codepoint = parse_codepoint(value)
		result = convert(codepoint)
	except NoCaseTarget as e:
		return error(http.HTTPStatus.NOT_FOUND, str(e), codepoint=format_codepoint(e.codepoint))
	except ValueError:
		return error(http.HTTPStatus.BAD_REQUEST, f"invalid codepoint {value!r}")
	return jsonify({"codepoint": format_codepoint(codepoint), target: format_codepoint(result)})

@app.route("/lowercase/<value>")
def lowercase(value):
	return sibling(to_lowercase, "lowercase", value)

@app.route("/uppercase/<value>")
def uppercase(value):
	return sibling(to_uppercase, "uppercase", value)
