"""Allow `python -m bastion` as a shortcut for the port-forward script."""

from bastion.scripts.port_forward import main

main()
