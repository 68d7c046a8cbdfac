"""Binary (Stein) GCD and extended GCD for 32-, 64- and 128-bit integers."""