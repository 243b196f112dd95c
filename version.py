import os
import subprocess
import re


# This line is updated automatically
version = "0.1.0"


def describe(cwd):
    """Return the version derived from the most recent git tag, if any."""
    try:
        description = subprocess.check_output(
            "git describe --tags".split(),
            stderr=subprocess.STDOUT,
            cwd=cwd,
            universal_newlines=True).rstrip()
    except (subprocess.CalledProcessError, OSError):
        return None

    parts = description.split("-")
    parts[0] = parts[0].lstrip('v')

    if len(parts) == 1:  # tagged release
        return parts[0]
    elif len(parts) == 3:  # tag + a few commits
        tag, revision, commit = parts
        return "{}.post{}+{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format: " + description)


# Inside the repository, refresh the version number stored above, in a
# source distribution it is already up-to-date.
thisdir = os.path.dirname(os.path.abspath(__file__))
if os.path.isdir(os.path.join(thisdir, ".git")):
    described = describe(thisdir)
    if described is not None and described != version:
        version = described

        with open(__file__) as f:
            thisfile = f.read()

        with open(__file__, "w") as f:
            f.write(re.sub(r"version = \".*\"\n",
                           "version = \"{}\"\n".format(version),
                           thisfile, count=1))
