# setup.py
from setuptools import setup, find_packages

setup(
    name="eta",
    version="0.1.0",
    description="A small Lisp: reader, tree-walking evaluator and REPL server",
    packages=find_packages(include=["eta", "eta.*", "eta_server", "eta_server.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "eta=eta.repl:main",
            "eta-server=eta_server.repl_server:main",
        ],
    },
    zip_safe=False,
)
