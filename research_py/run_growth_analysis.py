# run_growth_analysis.py

import os

import pandas as pd

# Import our project modules
import complexity_tester as ct
import experiment_config as ec
import growth_validator as gv
import report_formatter as rf
import timing_harness as th

# --- Main Growth Analysis Execution Block ---
if __name__ == "__main__":
    print("#" * 80 + "\n### GROWTH RATE VALIDATION REPORT ###\n" + "#" * 80)

    # 1. Measure every class with the configured sizes, in both variants
    config = ec.load_configuration()
    rows_by_class = th.run_experiments(config)
    array_rows_by_name = th.run_array_experiments(config)

    print("\n--- Raw Measurements ---")
    pd.options.display.float_format = '{:,.6f}'.format
    print(rf.rows_to_dataframe(rows_by_class))

    print("\n--- Raw Measurements (Array Variants) ---")
    print(rf.rows_to_dataframe(array_rows_by_name))

    # 2. Fit each class against its theoretical model
    summary_df = gv.build_growth_summary(rows_by_class)
    print("\n--- Growth Model Comparison ---")
    print(summary_df)

    # Array variants are fitted under their own class key
    array_rows_by_class = {
        ct.array_algorithms_collection[name][0]: rows for name, rows in array_rows_by_name.items()
    }
    array_summary_df = gv.build_growth_summary(array_rows_by_class)
    print("\n--- Growth Model Comparison (Array Variants) ---")
    print(array_summary_df)

    # 3. Plots and CSV, only when report saving is enabled
    if config["save_reports"]:
        print("\n--- Generating Plots ---")
        for class_key, rows in rows_by_class.items():
            title = f"Growth: {rf.CLASS_TITLES[class_key]} vs. Measured Time"
            chart_path = os.path.join(config["report_dir"], f"growth_{rf.make_safe_filename(class_key)}.png")
            if gv.plot_prediction_vs_measured(rows, class_key, title, chart_path):
                print(f"Generated plot for '{class_key}': {chart_path}")

        th.save_reports(rows_by_class, config["report_dir"])
    else:
        print("\n[Report] Report saving is disabled (save_reports is false), no files written.")

    # 4. Final English summary
    print("\n--- Growth Summary ---")
    print(gv.generate_growth_summary_text(summary_df))
    print("\n--- Growth Summary (Array Variants) ---")
    print(gv.generate_growth_summary_text(array_summary_df))

    print("\n" + "#" * 80 + "\n### GROWTH ANALYSIS COMPLETE ###\n" + "#" * 80)
