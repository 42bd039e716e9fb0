# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Recorded provider responses used across tests."""

BITBUCKET_USER_RESPONSE = """{
  "created_on": "2011-12-20T16:34:07.132459+00:00",
  "display_name": "tutorials account",
  "is_staff": false,
  "links": {
    "avatar": {
      "href": "https://bitbucket.org/account/tutorials/avatar/32/"
    },
    "html": {
      "href": "https://bitbucket.org/tutorials/"
    },
    "repositories": {
      "href": "https://api.bitbucket.org/2.0/repositories/tutorials"
    },
    "self": {
      "href": "https://api.bitbucket.org/2.0/users/tutorials"
    }
  },
  "location": null,
  "type": "user",
  "username": "tutorials",
  "uuid": "{c788b2da-b7a2-404c-9e26-d3f077557007}",
  "website": "https://tutorials.bitbucket.org/"
}"""

BITBUCKET_EMAIL_RESPONSE = """{
  "page": 1,
  "pagelen": 10,
  "size": 2,
  "values": [
    {
      "email": "tutorials@bitbucket.com",
      "is_confirmed": true,
      "is_primary": true,
      "links": {
        "self": {
          "href": "https://api.bitbucket.org/2.0/user/emails/tutorials@bitbucket.com"
        }
      },
      "type": "email"
    },
    {
      "email": "anotheremail@bitbucket.com",
      "is_confirmed": false,
      "is_primary": false,
      "links": {
        "self": {
          "href": "https://api.bitbucket.org/2.0/user/emails/anotheremail@bitbucket.com"
        }
      },
      "type": "email"
    }
  ]
}"""

BITBUCKET_EMPTY_EMAIL_RESPONSE = """{
  "page": 1,
  "pagelen": 10,
  "size": 0,
  "values": []
}"""

GITHUB_USER_RESPONSE = """{
  "login": "octocat",
  "id": 583231,
  "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
  "html_url": "https://github.com/octocat",
  "name": "The Octocat",
  "email": null
}"""

GITHUB_EMAIL_RESPONSE = """[
  {"email": "octocat@users.noreply.github.com", "verified": true, "primary": false, "visibility": null},
  {"email": "octocat@github.com", "verified": true, "primary": true, "visibility": "public"}
]"""
