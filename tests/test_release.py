# Sanity checks before making a release

import os
import subprocess
from importlib.metadata import version as installed_version

import pytest


def check_output(cmd):
    try:
        out = subprocess.check_output(
            cmd.split(),
            cwd=os.path.dirname(os.path.dirname(__file__)),
            stderr=subprocess.STDOUT,
            universal_newlines=True)
    except (OSError, subprocess.CalledProcessError):
        return None
    else:
        return out.rstrip()


def candidate_for_release():
    if check_output("git rev-parse --abbrev-ref HEAD") != "master":
        return False

    if check_output("git describe --exact-match --tags") is None:
        return False

    return True


if not candidate_for_release():
    pytest.skip("skipping pre-release tests (not a release)",
                allow_module_level=True)


def test_version():
    version = installed_version("seqarray")

    tag = check_output("git describe --exact-match --tags").lstrip('v')

    assert tag == version, "Package version and commit tag do not match"
