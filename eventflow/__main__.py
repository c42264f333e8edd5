from eventflow.main import main

main()
