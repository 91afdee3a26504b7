from clipstack.main import main

main()
