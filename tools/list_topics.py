import argparse
from pathlib import Path
import json
import csv

from disparity_view.bag_source import check_rosbag_path, list_sources
from disparity_view.source_catalog import DISPARITY_TYPES, display_label, filter_sources


def get_disparity_sources(bag_path):
    sources = filter_sources(list_sources(bag_path), DISPARITY_TYPES)
    return [
        {
            'label': source.label,
            'display': display_label(source.label),
            'topic': source.topic_path,
            'transport': source.transport,
        }
        for source in sorted(sources)
    ]


def main():
    parser = argparse.ArgumentParser(description='List selectable disparity topics in ROS bag files and save to JSON/CSV.')
    parser.add_argument('bag_dirs', nargs='+', help='List of ROS bag directories.')
    parser.add_argument('--output-json', default='data/analyze/disparity_topics.json', help='Output JSON file name.')
    parser.add_argument('--output-csv', default='data/analyze/disparity_topics.csv', help='Output CSV file name.')
    args = parser.parse_args()

    # Ensure output directories exist
    Path(args.output_json).parent.mkdir(parents=True, exist_ok=True)
    Path(args.output_csv).parent.mkdir(parents=True, exist_ok=True)

    all_bags_info = {}
    print("Processing rosbag directories...")
    for bag_dir in args.bag_dirs:
        p_bag_dir = Path(bag_dir)
        if not check_rosbag_path(p_bag_dir):
            print(f"  Skipping {bag_dir}: not a rosbag2 directory")
            continue
        print(f"Reading topics from: {p_bag_dir.name}")
        all_bags_info[p_bag_dir.name] = get_disparity_sources(p_bag_dir)

    # Save to JSON
    with open(args.output_json, 'w', encoding='utf-8') as f:
        json.dump(all_bags_info, f, indent=2, ensure_ascii=False)
    print(f"\nTopic information saved to {args.output_json}")

    # Save to CSV
    with open(args.output_csv, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.writer(f)
        writer.writerow(['Bag Name', 'Topic', 'Transport', 'Label'])
        for bag_name, sources in all_bags_info.items():
            if not sources:
                writer.writerow([bag_name, 'N/A', 'N/A', 'N/A'])
            for source in sources:
                writer.writerow([bag_name, source['topic'], source['transport'], source['label']])
    print(f"Topic information also saved to {args.output_csv}")

    # Print summary to console
    for bag_name, sources in all_bags_info.items():
        print(f'\n--- Disparity topics in {bag_name} ---')
        if not sources:
            print("  No disparity topics found.")
            continue
        for source in sources:
            print(f"  - {source['display']}")
            print(f"    - Topic:     {source['topic']}")
            print(f"    - Transport: {source['transport']}")


if __name__ == '__main__':
    main()
