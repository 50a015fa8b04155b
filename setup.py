from setuptools import setup, find_packages

setup(
    name="weathermcp",
    version="1.0.0",
    author="weathermcp",
    description="🌦️ Stateless MCP server for US weather alerts and forecasts from the National Weather Service",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["examples*", "tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",
        "mcp>=1.10.0,<2",
        "fastapi>=0.115.0",
        "pydantic>=2.7.0",
        "uvicorn>=0.30.0",
        "anyio>=4.5.0",
        "starlette>=0.40.0"
    ],
    extras_require={
        "test": ["pytest>=8.0.0", "pytest-asyncio>=0.23.0"]
    },
    entry_points={
        "console_scripts": ["weathermcp=weathermcp.__main__:main"]
    },
    license="Apache v2",
    classifiers=[
        "Programming Language :: Python :: 3"
    ]
)
