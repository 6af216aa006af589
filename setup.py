from setuptools import setup

setup(name="urikit",
  version="0.1",
  description="Percent coding for URIs and recognition of URLs and e-mail addresses in text.",
  license="MIT",
  packages=["urikit"],
  package_dir={'urikit': 'src'},
  install_requires=["click", "configparser"],
  extras_require={"test": ["pytest"]},
  python_requires="~=3.9",
  entry_points="""
    [console_scripts]
    urikit=urikit.cli:cli
  """)
