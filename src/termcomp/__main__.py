from termcomp.cli.main import main

main()
