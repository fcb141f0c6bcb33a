from pixelhitbox.preview import main

raise SystemExit(main())
