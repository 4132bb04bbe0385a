import io
import re

from setuptools import find_packages, setup

__version__ = re.search(
    r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
    io.open("src/taskpolicy/version.py", encoding="utf_8_sig").read(),
).group(1)


setup(
    name="taskpolicy-python",
    version=__version__,
    description="taskpolicy is a Python library of scheduler policies pairing pending jobs with eligible worker nodes.",
    long_description="""taskpolicy is a Python library of scheduler policies pairing pending jobs with eligible worker nodes.""",
    author="",
    author_email="",
    package_dir={"": "src"},
    packages=find_packages("src"),
    zip_safe=False,
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pydantic>=2",
        "typing_extensions",
        "fire",
    ],
    extras_require={
        "tests": ["pytest"],
    },
)
