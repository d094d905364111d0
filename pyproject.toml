[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking tools: a Go-Back-N sender and receiver over UDP, a lossy UDP forwarder and a remote uptime client and server"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "udp", "tcp", "go-back-n", "crc", "uptime", "forwarder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-gbn-sender = "netlab.udp_sender:main"
netlab-gbn-receiver = "netlab.udp_receiver:main"
netlab-ruptime-server = "netlab.ruptime_server:main"
netlab-ruptime-client = "netlab.ruptime_client:main"
netlab-udp-forwarder = "netlab.udp_forwarder:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
