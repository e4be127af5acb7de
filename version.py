import os
import re
import subprocess


# This line is updated automatically
version = "0.1.0"

# Inside a git checkout, take the version from the latest tag and write it
# back above, otherwise we are in a source distribution and the above
# version number is up-to-date.
try:
    description = subprocess.check_output(
        ["git", "describe", "--tags", "--match", "v*"],
        stderr=subprocess.STDOUT,
        cwd=os.path.dirname(os.path.abspath(__file__)),
        universal_newlines=True).rstrip()

except (OSError, subprocess.CalledProcessError):
    pass

else:
    tag, _, suffix = description[1:].partition("-")
    if suffix:  # commits after the tag: <tag>-<revision>-g<hash>
        revision, _, commit = suffix.partition("-")
        version = "{}.dev{}+{}".format(tag, revision, commit)
    else:
        version = tag

    with open(__file__) as f:
        thisfile = f.read()

    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       thisfile, count=1))
