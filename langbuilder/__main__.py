from langbuilder.ui.app import main

main()
