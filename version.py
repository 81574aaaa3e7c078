import os
import subprocess
import re


# This line is updated automatically
version = "0.1.0"

# When building from a git checkout, derive the version from the last tag
# and store it in this file, source distributions keep the above value.
thisdir = os.path.dirname(os.path.abspath(__file__))
try:
    description = subprocess.check_output(
        ["git", "describe", "--tags"],
        stderr=subprocess.STDOUT,
        cwd=thisdir,
        universal_newlines=True).rstrip()

except (OSError, subprocess.CalledProcessError):
    pass

else:
    tag, _, rest = description.lstrip('v').partition("-")

    if rest == "":  # tagged release
        version = tag
    else:  # tag + a few commits: v1.2-3-gabcdef
        revision, commit = rest.split("-", 1)
        version = "{}+r{}.{}".format(tag, revision, commit)

    with open(__file__) as f:
        thisfile = f.read()

    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       thisfile, count=1))
