from vbranch.cli.cli import main

main()
