# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="silence",
    version="0.1.0",
    description="A small Lisp interpreter over exact rationals with lexical closures",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["silence", "silence.*"]),
    package_data={"silence": ["prelude/*.sil"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["silence=silence.repl:main"],
    },
    zip_safe=False,
)
