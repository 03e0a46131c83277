from adomcp.cli import main

main()
